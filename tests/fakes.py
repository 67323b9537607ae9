"""In-memory stand-in for the upstream comment service."""

import itertools
import json
import time
from collections import Counter
from typing import Any

import httpx


class FakeUpstream:
    """Serves the upstream REST shape from memory.

    Mount with ``httpx.MockTransport(fake.handler)``. Every request is kept
    in ``requests`` so tests can check what was (or was not) forwarded.
    """

    def __init__(self) -> None:
        self.comments: dict[str, dict[str, Any]] = {}
        self.reactions: Counter[tuple[str, str]] = Counter()
        self.requests: list[httpx.Request] = []
        self.unreachable = False
        self.fail_status: int | None = None
        # Answer an empty board with null instead of []
        self.null_when_empty = False
        self._ids = itertools.count(1)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def tally(self, comment_id: str, emoji: str) -> int:
        return self.reactions[(comment_id, emoji)]

    def seed(
        self, name: str, message: str, parent_id: str | None = None
    ) -> dict[str, Any]:
        comment_id = str(next(self._ids))
        row = {
            "id": comment_id,
            "name": name,
            "message": message,
            "timestamp": int(time.time() * 1000),
            "parent_id": parent_id,
        }
        self.comments[comment_id] = row
        return row

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.unreachable:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"error": "upstream broke"})

        route = (request.method, request.url.path)
        if route == ("GET", "/healthz"):
            return httpx.Response(200)
        if route == ("GET", "/comments"):
            roots = self._tree()
            if not roots and self.null_when_empty:
                return httpx.Response(200, content=b"null\n")
            return httpx.Response(200, json=roots)
        if route == ("POST", "/comments"):
            return self._create(json.loads(request.content))
        if route == ("POST", "/reactions"):
            body = json.loads(request.content)
            self.reactions[(body["commentId"], body["emoji"])] += 1
            return httpx.Response(201, json={"status": "reaction recorded"})
        return httpx.Response(404, text="404 page not found")

    def _create(self, body: dict[str, Any]) -> httpx.Response:
        parent_id = body.get("parentId")
        if parent_id is not None and parent_id not in self.comments:
            return httpx.Response(500, json={"error": "Failed to create comment"})

        row = self.seed(body["name"].strip(), body["message"].strip(), parent_id)
        created = {k: v for k, v in row.items() if k != "parent_id"}
        if parent_id is not None:
            created["parentCommentId"] = parent_id
        return httpx.Response(201, json=created)

    def _entry(self, row: dict[str, Any]) -> dict[str, Any]:
        return {
            "id": row["id"],
            "name": row["name"],
            "message": row["message"],
            "timestamp": row["timestamp"],
            "reactions": {
                emoji: count
                for (comment_id, emoji), count in self.reactions.items()
                if comment_id == row["id"]
            },
            "replies": [],
        }

    def _tree(self) -> list[dict[str, Any]]:
        # Newest first; replies oldest first under their parent
        rows = sorted(self.comments.values(), key=lambda r: int(r["id"]), reverse=True)
        entries = {row["id"]: self._entry(row) for row in rows}
        roots = []
        for row in rows:
            if row["parent_id"] is None:
                roots.append(entries[row["id"]])
        for row in reversed(rows):
            if row["parent_id"] is not None:
                entries[row["parent_id"]]["replies"].append(entries[row["id"]])
        return roots
