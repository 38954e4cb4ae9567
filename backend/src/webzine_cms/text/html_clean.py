"""Normalization of contentEditable HTML into block-level article markup.

Browsers serialize a contentEditable surface inconsistently: a <div> per
line, <br> as a paragraph break, empty <p></p> left behind by deletions.
clean_html_content() rewrites that into plain block structure with a fixed
chain of regex passes.
"""

from __future__ import annotations

import re

# Block elements that must not live inside a <p>
_NESTED_BLOCKS = r"h[1-6]|ul|ol|table|blockquote|pre"

_DIV_TAG_RE = re.compile(r"<div\b[^>]*>|</div\s*>", re.IGNORECASE)
_BR_TAG_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_BLOCK_START_RE = re.compile(rf"^\s*<(?:p|{_NESTED_BLOCKS})\b", re.IGNORECASE)
_EMPTY_P_RE = re.compile(r"<p\b[^>]*>(?:\s|&nbsp;|&#160;)*</p\s*>", re.IGNORECASE)
_P_BEFORE_BLOCK_RE = re.compile(rf"<p\b[^>]*>\s*(?=<(?:{_NESTED_BLOCKS})\b)", re.IGNORECASE)
_P_AFTER_BLOCK_RE = re.compile(rf"(</(?:{_NESTED_BLOCKS})\s*>)\s*</p\s*>", re.IGNORECASE)


def _wrap_inline(html: str) -> str:
    if html.strip() and not _BLOCK_START_RE.match(html):
        return f"<p>{html}</p>"
    return html


def clean_html_content(html: str | None) -> str:
    """Normalize raw editor HTML for storage.

    Passes, in order:
    1. Drop <div> wrappers (opening and closing tags)
    2. <br> / <br/> → paragraph boundary
    3. Wrap in <p> unless it already starts with a block tag
    4. Remove empty paragraphs (then re-check 3)
    5. Unwrap block elements from an enclosing <p> (opening half)
    6. ... and the matching closing half
    7. Trim

    Never raises; whitespace-only or <br>-only input comes back as "".
    """
    if not html:
        return ""

    cleaned = _DIV_TAG_RE.sub("", html)
    cleaned = _BR_TAG_RE.sub("</p><p>", cleaned)

    cleaned = _wrap_inline(cleaned)

    # Repeat: removing an inner empty <p></p> can leave the outer one empty
    previous = None
    while cleaned != previous:
        previous = cleaned
        cleaned = _EMPTY_P_RE.sub("", cleaned)

    # A leading empty <p> may have hidden inline content from the first check
    cleaned = _wrap_inline(cleaned)

    cleaned = _P_BEFORE_BLOCK_RE.sub("", cleaned)
    cleaned = _P_AFTER_BLOCK_RE.sub(r"\1", cleaned)

    return cleaned.strip()
