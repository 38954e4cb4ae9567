"""Authoritative server-side slug assignment.

Posts, authors, categories, subcategories and webzine issues all get their
slug here before insert. The document store's unique index on ``slug`` is
the real guard; ``is_taken`` lets the caller consult it up front so a
conflict becomes a suffixed slug instead of a failed save.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from webzine_cms.config import settings
from webzine_cms.text.slugify import slugify
from webzine_cms.utils.logging import get_logger

log = get_logger()


class SlugError(ValueError):
    """No usable slug could be derived."""


class SlugConflictError(SlugError):
    """Every candidate slug was already taken."""

    def __init__(self, slug: str, attempts: int):
        self.slug = slug
        self.attempts = attempts
        super().__init__(f"Slug '{slug}' already exists ({attempts} suffixed candidates taken).")


def with_random_suffix(slug: str, digits: int | None = None) -> str:
    """Append a random ``digits``-long number: "first-article" → "first-article-4821"."""
    digits = max(1, digits or settings.slug_suffix_digits)
    number = random.randint(10 ** (digits - 1), 10**digits - 1)
    return f"{slug}-{number}"


def resolve_slug(
    name: str | None,
    slug: str | None = None,
    *,
    is_taken: Callable[[str], bool] | None = None,
    kind: str = "item",
    max_attempts: int | None = None,
) -> str:
    """Pick the slug to store for a new or renamed document.

    A non-blank explicit ``slug`` wins (run through slugify() so hand-typed
    slugs are cleaned the same way); otherwise the slug comes from ``name``.
    If ``is_taken`` reports a conflict, random numeric suffixes are tried.

    Raises:
        SlugError: nothing slug-worthy in either ``slug`` or ``name``.
        SlugConflictError: all ``max_attempts`` suffixed candidates were taken.
    """
    if slug and slug.strip():
        base = slugify(slug)
    else:
        base = slugify(name)
    if not base:
        raise SlugError(f"Name is required to create {kind}.")

    if is_taken is None or not is_taken(base):
        return base

    attempts = max_attempts or settings.slug_max_attempts
    for _ in range(attempts):
        candidate = with_random_suffix(base)
        if not is_taken(candidate):
            log.debug(f"Slug '{base}' taken, using '{candidate}'")
            return candidate

    raise SlugConflictError(base, attempts)
