"""Landing page template for PONHUB.SE.

A deliberately hideous page: clashing gradients, rotated boxes, dashed
borders. The page shell is a ``str.format`` template; the stylesheet and
the board script are inserted verbatim so their braces need no escaping.
"""

import html
import json

from ponhub.comments.models import REACTION_EMOJIS


PAGE_TITLE = "PONHUB.SE - PON IS THE WORST"
PAGE_DESCRIPTION = "A monument to my hatred of Passive Optical Networks"

# ==============================================================================
# Page content
# ==============================================================================

RANT_CARDS: tuple[tuple[str, str], ...] = (
    (
        "STONE AGE TECH",
        "PON is literally from the STONE AGE. We have quantum computers and "
        "we're still using this GARBAGE???",
    ),
    (
        "IT SUCKS",
        "Passive Optical Network? More like PASSIVE OPTICAL NIGHTMARE. "
        "It just sits there... MOCKING ME.",
    ),
    (
        "I HATE IT",
        "Every. Single. Day. PON finds new ways to ruin my life. "
        "It's not just bad technology, it's PERSONAL.",
    ),
)

COMPLAINTS: tuple[str, ...] = (
    "Split ratios that make NO SENSE",
    "Distance limitations that HAUNT MY DREAMS",
    "Splitter losses that STEAL MY BANDWIDTH",
    "Absolute configuration HELL",
    "Troubleshooting is IMPOSSIBLE",
    "Fiber splits everywhere = CHAOS",
    "No dedicated bandwidth : SHARING IS NOT CARING",
    "It is just DSL but with LASERS",
    "You will constantly mix up OLT and ONT?!",
    "24/7 phonecalls to support",
    "I do not understand :(",
)

SUFFERING_STATS: tuple[tuple[str, str], ...] = (
    ("HOURS WASTED", "∞"),
    ("FRUSTRATION LEVEL", "MAX"),
    ("SANITY REMAINING", "0%"),
    ("HATE INTENSITY", "💯"),
)

GLITCH_VARIANTS: tuple[str, ...] = ("P0N", "POИ", "P◊N", "PON", "P⊗N", "PØN")

# ==============================================================================
# Stylesheet
# ==============================================================================

STYLES = """
* { box-sizing: border-box; }
body {
  margin: 0;
  min-height: 100vh;
  font-family: Impact, "Comic Sans MS", sans-serif;
  background: linear-gradient(135deg, #fde047, #ec4899, #a3e635);
  overflow-x: hidden;
}
.page { max-width: 1100px; margin: 0 auto; padding: 2rem 1rem; }
.glitch {
  text-align: center;
  font-size: 7rem;
  color: #dc2626;
  margin: 1rem 0 0;
  text-shadow: 5px 5px 0 #00ff00, -5px -5px 0 #ff00ff, 10px 10px 0 #ffff00;
  animation: wobble 2s ease-in-out infinite;
}
@keyframes wobble {
  0%, 100% { transform: rotate(-8deg); }
  50% { transform: rotate(8deg); }
}
.tagline {
  display: table;
  margin: 1rem auto 2rem;
  padding: .5rem 1rem;
  font-size: 2.5rem;
  color: #581c87;
  background: #fb923c;
  border: 8px dashed #16a34a;
  transform: rotate(2deg);
}
.cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(260px, 1fr)); gap: 1rem; }
.card { padding: 1.5rem; border: 8px solid #fde047; background: #ef4444; color: #fef08a; }
.card:nth-child(2) { background: #a3e635; border-color: #db2777; color: #b91c1c; transform: rotate(2deg); }
.card:nth-child(3) { background: #f97316; border-color: #2563eb; color: #14532d; transform: rotate(-1deg); }
.card:first-child { transform: rotate(-3deg); }
.card h3 { font-size: 1.8rem; text-decoration: underline wavy; margin-top: 0; }
.section { margin: 2rem 0; padding: 2rem; border: 8px dashed #000; }
.complaints { background: linear-gradient(90deg, #9333ea, #ef4444, #facc15); transform: rotate(-1deg); }
.complaints h2, .suffering h2, .rage h2 { text-align: center; font-size: 2.6rem; color: #fff; }
.complaints li {
  list-style: none;
  margin: .8rem 0;
  padding: 1rem;
  font-size: 1.4rem;
  color: #b91c1c;
  background: #fde047;
  border: 4px solid #16a34a;
  box-shadow: 8px 8px 0 rgba(0, 0, 0, .5);
}
.complaints li:nth-child(odd) { transform: rotate(-1.5deg); }
.complaints li:nth-child(even) { transform: rotate(1.5deg); }
.suffering { background: #ec4899; border: 8px solid #ea580c; }
.stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(160px, 1fr)); gap: 1rem; }
.stat { padding: 1rem; text-align: center; background: #facc15; border: 4px solid #7e22ce; }
.stat .value { font-size: 3rem; color: #dc2626; }
.stat .label { font-size: .9rem; color: #581c87; }
.rage { background: linear-gradient(135deg, #f97316, #dc2626, #7e22ce); border: 8px solid #facc15; transform: rotate(1deg); }
.rage form, .reply-form { background: #a3e635; border: 8px solid #db2777; padding: 1.5rem; margin-bottom: 2rem; transform: rotate(-2deg); }
.rage label { display: block; font-size: 1.5rem; color: #581c87; }
.rage input, .rage textarea {
  width: 100%;
  padding: 1rem;
  margin-bottom: 1rem;
  font-size: 1.2rem;
  background: #fef08a;
  border: 4px solid #dc2626;
}
.rage button {
  cursor: pointer;
  font-family: inherit;
  font-size: 1.2rem;
  padding: .5rem 1rem;
  border: 3px solid #000;
  background: #fb923c;
}
.rage button.submit { width: 100%; font-size: 2rem; color: #fde047; background: #dc2626; border: 4px solid #16a34a; }
.rage button:disabled { opacity: .5; cursor: not-allowed; }
.board-title { text-align: center; color: #fff; background: #dc2626; border: 4px solid #facc15; padding: 1rem; }
.comment { margin: 1rem 0; padding: 1.5rem; background: #fde047; border: 4px solid #7e22ce; box-shadow: 6px 6px 0 rgba(0, 0, 0, .4); }
.comment:nth-child(odd) { transform: rotate(-1deg); }
.comment:nth-child(even) { transform: rotate(1deg); }
.comment .author { background: #f472b6; border: 2px solid #dc2626; padding: .2rem .6rem; color: #581c87; }
.comment .when { float: right; font-size: .8rem; color: #374151; }
.comment .body { color: #b91c1c; font-size: 1.2rem; }
.reactions { display: flex; flex-wrap: wrap; gap: .5rem; margin-bottom: .8rem; }
.replies { margin-top: 1rem; padding-left: 1rem; border-left: 4px solid #ea580c; }
.reply { margin: .5rem 0; padding: .8rem; background: #bef264; border: 2px solid #9333ea; transform: rotate(1deg); }
.empty { text-align: center; font-size: 1.6rem; color: #dc2626; background: #fde047; padding: 1.5rem; }
footer { text-align: center; padding: 2rem; border: 8px dashed #581c87; background: linear-gradient(90deg, #dc2626, #facc15, #22c55e); transform: rotate(1deg); }
footer .big { font-size: 2rem; color: #fff; text-shadow: 3px 3px 0 #000; }
.nag {
  position: fixed;
  right: 1rem;
  bottom: 1rem;
  padding: 1rem;
  font-size: 1.3rem;
  color: #fff;
  background: #dc2626;
  border: 4px solid #facc15;
  animation: wobble 1s infinite;
}
"""

# ==============================================================================
# Board script
# ==============================================================================

BOARD_SCRIPT = """
(function () {
  const board = document.getElementById("board");
  const emojis = JSON.parse(board.dataset.emojis);
  const glitches = JSON.parse(board.dataset.glitches);
  const form = document.getElementById("comment-form");
  const nameInput = document.getElementById("name");
  const messageInput = document.getElementById("message");
  const submitButton = document.getElementById("submit");
  const count = document.getElementById("comment-count");
  const glitch = document.getElementById("glitch");

  const state = { comments: [], submitting: false, replyingTo: null };

  setInterval(function () {
    glitch.textContent = glitches[Math.floor(Math.random() * glitches.length)];
  }, 200);

  function el(tag, className, text) {
    const node = document.createElement(tag);
    if (className) node.className = className;
    if (text !== undefined) node.textContent = text;
    return node;
  }

  function header(entry) {
    const row = el("div");
    row.appendChild(el("span", "author", entry.name));
    row.appendChild(el("span", "when", new Date(entry.timestamp).toLocaleDateString()));
    return row;
  }

  function renderComment(comment) {
    const card = el("div", "comment");
    card.appendChild(header(comment));
    card.appendChild(el("p", "body", comment.message));

    const reactions = el("div", "reactions");
    emojis.forEach(function (emoji) {
      const button = el("button", null, emoji + " " + ((comment.reactions || {})[emoji] || 0));
      button.type = "button";
      button.addEventListener("click", function () { react(comment.id, emoji); });
      reactions.appendChild(button);
    });
    card.appendChild(reactions);

    const replying = state.replyingTo === comment.id;
    const toggle = el("button", null, replying ? "CANCEL REPLY" : "REPLY (" + comment.replies.length + ")");
    toggle.type = "button";
    toggle.addEventListener("click", function () {
      state.replyingTo = replying ? null : comment.id;
      render();
    });
    card.appendChild(toggle);

    if (replying) {
      const replyForm = el("div", "reply-form");
      const replyName = el("input");
      replyName.placeholder = "Your name";
      replyName.value = nameInput.value;
      const replyMessage = el("textarea");
      replyMessage.placeholder = "Your reply...";
      replyMessage.rows = 2;
      replyMessage.value = messageInput.value;
      const send = el("button", null, "SUBMIT REPLY");
      send.type = "button";
      send.addEventListener("click", function () {
        nameInput.value = replyName.value;
        messageInput.value = replyMessage.value;
        submitReply(comment.id);
      });
      replyForm.append(replyName, replyMessage, send);
      card.appendChild(replyForm);
    }

    if (comment.replies.length > 0) {
      const replies = el("div", "replies");
      comment.replies.forEach(function (reply) {
        const item = el("div", "reply");
        item.appendChild(header(reply));
        item.appendChild(el("p", "body", reply.message));
        replies.appendChild(item);
      });
      card.appendChild(replies);
    }
    return card;
  }

  function render() {
    board.replaceChildren();
    count.textContent = state.comments.length;
    if (state.comments.length === 0) {
      board.appendChild(el("div", "empty", "Be the first to share your PON suffering!"));
      return;
    }
    state.comments.forEach(function (comment) { board.appendChild(renderComment(comment)); });
  }

  function draft() {
    return { name: nameInput.value.trim(), message: messageInput.value.trim() };
  }

  function clearDraft() {
    nameInput.value = "";
    messageInput.value = "";
  }

  function postJSON(url, body) {
    return fetch(url, {
      method: "POST",
      headers: { "Content-Type": "application/json" },
      body: JSON.stringify(body),
    });
  }

  async function load() {
    try {
      const response = await fetch("/api/comments");
      if (response.ok) {
        state.comments = await response.json();
        render();
      }
    } catch (error) {
      console.error("Failed to fetch comments:", error);
    }
  }

  async function submitComment(event) {
    event.preventDefault();
    const body = draft();
    if (!body.name || !body.message || state.submitting) return;

    state.submitting = true;
    submitButton.disabled = true;
    submitButton.textContent = "SUBMITTING...";
    try {
      const response = await postJSON("/api/comments", body);
      if (response.ok) {
        const comment = await response.json();
        comment.reactions = comment.reactions || {};
        comment.replies = comment.replies || [];
        state.comments = [comment].concat(state.comments);
        clearDraft();
        render();
      }
    } catch (error) {
      console.error("Failed to submit comment:", error);
    } finally {
      state.submitting = false;
      submitButton.disabled = false;
      submitButton.textContent = "SUBMIT YOUR HATE";
    }
  }

  async function submitReply(commentId) {
    const body = draft();
    if (!body.name || !body.message || state.submitting) return;

    state.submitting = true;
    try {
      const response = await postJSON("/api/comments", Object.assign({ parentId: commentId }, body));
      if (response.ok) {
        const reply = await response.json();
        state.comments.forEach(function (comment) {
          if (comment.id === commentId) comment.replies.push(reply);
        });
        clearDraft();
        state.replyingTo = null;
        render();
      }
    } catch (error) {
      console.error("Failed to submit reply:", error);
    } finally {
      state.submitting = false;
    }
  }

  function bump(commentId, emoji, delta) {
    state.comments.forEach(function (comment) {
      if (comment.id !== commentId) return;
      comment.reactions = comment.reactions || {};
      comment.reactions[emoji] = Math.max(0, (comment.reactions[emoji] || 0) + delta);
    });
    render();
  }

  async function react(commentId, emoji) {
    bump(commentId, emoji, 1);
    try {
      const response = await postJSON("/api/reactions", { commentId: commentId, emoji: emoji });
      if (!response.ok) throw new Error("Failed to add reaction");
    } catch (error) {
      console.error("Failed to add reaction:", error);
      bump(commentId, emoji, -1);
    }
  }

  form.addEventListener("submit", submitComment);
  render();
  load();
})();
"""

# ==============================================================================
# Page shell
# ==============================================================================

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="description" content="{description}">
  <title>{title}</title>
  <style>{styles}</style>
</head>
<body>
  <div class="page">
    <h1 class="glitch" id="glitch">PON</h1>
    <h2 class="tagline">THE BANE OF MY EXISTENCE</h2>

    <div class="cards">
{cards}
    </div>

    <div class="section complaints">
      <h2>WHY PON IS THE WORST</h2>
      <ul>
{complaints}
      </ul>
    </div>

    <div class="section suffering">
      <h2>MY DAILY PON SUFFERING</h2>
      <div class="stats">
{stats}
      </div>
    </div>

    <div class="section rage">
      <h2>SHARE YOUR PON RAGE</h2>
      <form id="comment-form">
        <label for="name">YOUR NAME:</label>
        <input id="name" type="text" placeholder="Anonymous PON Hater" required>
        <label for="message">YOUR RAGE MESSAGE:</label>
        <textarea id="message" rows="4" placeholder="Tell us why PON ruined your day..." required></textarea>
        <button id="submit" class="submit" type="submit">SUBMIT YOUR HATE</button>
      </form>
      <h3 class="board-title">COMMUNITY RAGE BOARD (<span id="comment-count">0</span>)</h3>
      <div id="board" data-emojis="{emojis}" data-glitches="{glitches}"></div>
    </div>

    <footer>
      <p class="big">PON = PAIN • OUTRAGE • NIGHTMARE</p>
      <p>Passive Optical Network? More like PIECE OF NSHIT</p>
      <p>🔥 PONHUB.SE - WHERE THE TRUTH IS TOLD 🔥</p>
    </footer>
  </div>
  <div class="nag">PON SUCKS!</div>
  <script>{script}</script>
</body>
</html>
"""


def _json_attr(values: tuple[str, ...]) -> str:
    return html.escape(json.dumps(list(values), ensure_ascii=False), quote=True)


def render_landing_page() -> str:
    """Render the full landing page HTML."""
    cards = "\n".join(
        f'      <div class="card"><h3>{html.escape(title)}</h3>'
        f"<p>{html.escape(text)}</p></div>"
        for title, text in RANT_CARDS
    )
    complaints = "\n".join(
        f"        <li>❌ {html.escape(complaint)}</li>" for complaint in COMPLAINTS
    )
    stats = "\n".join(
        f'        <div class="stat"><div class="value">{html.escape(value)}</div>'
        f'<div class="label">{html.escape(label)}</div></div>'
        for label, value in SUFFERING_STATS
    )

    return PAGE_TEMPLATE.format(
        title=html.escape(PAGE_TITLE),
        description=html.escape(PAGE_DESCRIPTION),
        styles=STYLES,
        cards=cards,
        complaints=complaints,
        stats=stats,
        emojis=_json_attr(REACTION_EMOJIS),
        glitches=_json_attr(GLITCH_VARIANTS),
        script=BOARD_SCRIPT,
    )
