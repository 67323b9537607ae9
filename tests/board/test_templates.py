"""Tests for the landing page template."""

import json
from html.parser import HTMLParser

from ponhub.board.templates import COMPLAINTS, PAGE_TITLE, render_landing_page
from ponhub.comments.models import REACTION_EMOJIS


class BoardAttrs(HTMLParser):
    def __init__(self):
        super().__init__()
        self.attrs: dict[str, str | None] = {}

    def handle_starttag(self, tag, attrs):
        if dict(attrs).get("id") == "board":
            self.attrs = dict(attrs)


def test_page_has_title_and_complaints():
    page = render_landing_page()

    assert f"<title>{PAGE_TITLE}</title>" in page
    for complaint in COMPLAINTS:
        assert complaint in page


def test_board_carries_reaction_palette():
    parser = BoardAttrs()
    parser.feed(render_landing_page())

    assert json.loads(parser.attrs["data-emojis"]) == list(REACTION_EMOJIS)


def test_script_and_styles_inserted_verbatim():
    page = render_landing_page()

    assert 'fetch("/api/comments")' in page
    assert "@keyframes wobble" in page
