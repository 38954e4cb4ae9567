"""Title normalization with Malayalam Unicode support.

Titles arrive from form inputs and pasted text: HTML entities, decomposed
vowel signs and stray whitespace all show up.
"""

import html
import re
import unicodedata


def normalize_text(text: str | None) -> str:
    """Normalize Unicode text before it is stored or slugified.

    Steps:
    1. NFC normalization (composes split vowel signs: െ + ാ → ൊ)
    2. HTML entity decoding (&amp; → &, &#8217; → ', etc.)
    3. Collapse whitespace
    """
    if not text:
        return ""

    # ZWJ/ZWNJ survive NFC, which old-style chillu sequences rely on
    text = unicodedata.normalize("NFC", text)

    text = html.unescape(text)

    text = re.sub(r"\s+", " ", text).strip()

    return text
