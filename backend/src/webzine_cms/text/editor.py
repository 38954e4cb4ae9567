"""Pure helpers behind the rich-text editor toolbar.

Word counting, find/replace and the HTML snippets the editor inserts for
tables and links. None of these touch a DOM; they work on serialized HTML.
"""

from __future__ import annotations

import html
import re

from webzine_cms.utils.logging import get_logger

log = get_logger()

_TAG_RE = re.compile(r"<[^>]*>")
# Tags that end a visual line; replaced by a space so words don't run together
_BREAKING_TAG_RE = re.compile(
    r"</?(?:p|div|br|li|h[1-6]|ul|ol|table|tr|td|th|blockquote|pre)\b[^>]*>",
    re.IGNORECASE,
)
_WHITESPACE_RE = re.compile(r"\s+")


def html_to_text(content: str | None) -> str:
    """Visible text of an HTML fragment, whitespace collapsed."""
    if not content:
        return ""
    text = _BREAKING_TAG_RE.sub(" ", content)
    text = _TAG_RE.sub("", text)
    text = html.unescape(text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def has_text_content(content: str | None) -> bool:
    """True if the fragment holds any text once markup is stripped."""
    return bool(html_to_text(content))


def count_words(content: str | None) -> int:
    """Number of whitespace-separated words in the visible text, as the editor footer shows."""
    text = html_to_text(content)
    return len(text.split()) if text else 0


def find_replace(content: str, find: str, replace: str) -> str:
    """Replace every case-insensitive regex match of ``find`` with ``replace``.

    ``replace`` is inserted literally (no backreferences). An empty or invalid
    pattern leaves the content unchanged.
    """
    if not find or not content:
        return content
    try:
        pattern = re.compile(find, re.IGNORECASE)
    except re.error as e:
        log.warning(f"Invalid find pattern {find!r}: {e}")
        return content
    return pattern.sub(lambda _m: replace, content)


def build_table_html(rows: int, cols: int) -> str:
    """Empty rows × cols table, followed by a paragraph to keep typing after it."""
    rows = max(1, int(rows))
    cols = max(1, int(cols))
    cell = '<td class="border border-slate-300 p-2 min-w-[50px]">&nbsp;</td>'
    body = "".join(f"<tr>{cell * cols}</tr>" for _ in range(rows))
    return f'<table class="w-full border-collapse my-2"><tbody>{body}</tbody></table><p><br/></p>'


def build_link_html(url: str, text: str | None = None) -> str:
    """Anchor opening in a new tab. Falls back to the URL as link text."""
    label = text if text and text.strip() else url
    return (
        f'<a href="{html.escape(url, quote=True)}" target="_blank" '
        f'rel="noopener noreferrer">{html.escape(label, quote=False)}</a>'
    )
