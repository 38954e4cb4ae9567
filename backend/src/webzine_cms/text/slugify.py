"""Malayalam-aware title → URL slug transliteration.

A Malayalam consonant carries an inherent "a". A following vowel sign
replaces that vowel and a following virama (chandrakkala) drops it, so the
input is read as tokens with one character of lookahead instead of one
code point at a time:

    ക + ി  → "ki"   (not "kai")
    ദ + ്  → "d"
    ക      → "ka"

Everything not in the table (Latin letters, punctuation, unmapped symbols)
passes through and is cleaned up by the final ASCII pass.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from types import MappingProxyType
from typing import NamedTuple

MALAYALAM_MAP = MappingProxyType({
    # Independent vowels
    "അ": "a", "ആ": "aa", "ഇ": "i", "ഈ": "ee", "ഉ": "u", "ഊ": "oo", "ഋ": "ru",
    "എ": "e", "ഏ": "e", "ഐ": "ai", "ഒ": "o", "ഓ": "o", "ഔ": "au",
    # Consonants
    "ക": "ka", "ഖ": "kha", "ഗ": "ga", "ഘ": "gha", "ങ": "nga",
    "ച": "cha", "ഛ": "chha", "ജ": "ja", "ഝ": "jha", "ഞ": "nja",
    "ട": "ta", "ഠ": "tha", "ഡ": "da", "ഢ": "dha", "ണ": "na",
    "ത": "ta", "ഥ": "tha", "ദ": "da", "ധ": "dha", "ന": "na",
    "പ": "pa", "ഫ": "pha", "ബ": "ba", "ഭ": "bha", "മ": "ma",
    "യ": "ya", "ര": "ra", "ല": "la", "വ": "va", "ശ": "sha",
    "ഷ": "sha", "സ": "sa", "ഹ": "ha", "ള": "la", "ഴ": "zha", "റ": "ra",
    # Chillu letters (atomic, no inherent vowel)
    "ൺ": "n", "ൻ": "n", "ർ": "r", "ൽ": "l", "ൾ": "l", "ൿ": "k",
    # Vowel signs
    "ാ": "aa", "ി": "i", "ീ": "ee", "ു": "u", "ൂ": "oo", "ൃ": "ru",
    "െ": "e", "േ": "e", "ൈ": "ai", "ൊ": "o", "ോ": "o", "ൗ": "au", "ൌ": "au",
    # Anusvara, visarga, virama
    "ം": "m", "ഃ": "h", "്": "",
    "0": "0", "1": "1", "2": "2", "3": "3", "4": "4",
    "5": "5", "6": "6", "7": "7", "8": "8", "9": "9",
})

CONSONANTS = frozenset(
    "കഖഗഘങചഛജഝഞടഠഡഢണതഥദധനപഫബഭമയരലവശഷസഹളഴറ"
)

VOWEL_SIGNS = frozenset("ാിീുൂൃെേൈൊോൗൌ")

VIRAMA = "്"

_WHITESPACE_RE = re.compile(r"\s+")
# ASCII-only: keeps the slug inside [a-z0-9-] even for unmapped letters
_NON_SLUG_RE = re.compile(r"[^a-z0-9\-]+")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")


class Lone(NamedTuple):
    """A single character, romanized on its own."""

    char: str


class ConsonantCluster(NamedTuple):
    """A consonant followed by a virama or a vowel sign."""

    consonant: str
    mark: str


Token = Lone | ConsonantCluster


def tokenize(text: str) -> Iterator[Token]:
    """Split text into tokens, pairing a consonant with a following virama or vowel sign."""
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        nxt = text[i + 1] if i + 1 < n else ""
        if char in CONSONANTS and (nxt == VIRAMA or nxt in VOWEL_SIGNS):
            yield ConsonantCluster(char, nxt)
            i += 2
        else:
            yield Lone(char)
            i += 1


def romanize(token: Token) -> str:
    """Romanize one token. Unmapped lone characters are returned unchanged."""
    if isinstance(token, ConsonantCluster):
        # Drop the inherent "a", then add the vowel sign's sound ("" for virama)
        stem = MALAYALAM_MAP[token.consonant][:-1]
        return stem + MALAYALAM_MAP[token.mark]
    return MALAYALAM_MAP.get(token.char, token.char)


def transliterate(text: str | None) -> str:
    """Lowercase and romanize text without any slug cleanup."""
    if not text:
        return ""
    return "".join(romanize(tok) for tok in tokenize(str(text).lower()))


def slugify(text: str | None) -> str:
    """Convert a title (Malayalam, Latin or mixed) to a URL-safe ASCII slug.

    Never raises. Empty/None input, or input made only of characters the
    cleanup removes, yields "" — callers decide what an empty slug means.
    """
    result = transliterate(text).strip()
    result = _WHITESPACE_RE.sub("-", result)
    result = _NON_SLUG_RE.sub("", result)
    result = _HYPHEN_RUN_RE.sub("-", result)
    return result.strip("-")
