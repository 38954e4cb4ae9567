import re

import pytest

from webzine_cms.slugs import SlugConflictError, SlugError, resolve_slug, with_random_suffix


@pytest.fixture
def fixed_suffix(monkeypatch):
    monkeypatch.setattr("webzine_cms.slugs.random.randint", lambda a, b: 1234)


def test_slug_from_name(sample_malayalam_title):
    assert resolve_slug(sample_malayalam_title) == "aadya-lekhanam"


def test_explicit_slug_wins():
    assert resolve_slug("Some Title", "My Custom Slug") == "my-custom-slug"


def test_blank_explicit_slug_falls_back_to_name():
    assert resolve_slug("Hello World", "   ") == "hello-world"
    assert resolve_slug("Hello World", None) == "hello-world"


def test_empty_slug_raises():
    with pytest.raises(SlugError, match="Name is required to create category."):
        resolve_slug("", kind="category")
    with pytest.raises(SlugError):
        resolve_slug("!!!", "???")


def test_free_slug_is_returned_unchanged():
    assert resolve_slug("Hello World", is_taken=lambda s: False) == "hello-world"


def test_conflict_appends_random_number():
    taken = {"hello-world"}
    slug = resolve_slug("Hello World", is_taken=taken.__contains__)
    assert re.fullmatch(r"hello-world-\d{4}", slug)


def test_conflict_with_fixed_suffix(fixed_suffix):
    assert resolve_slug("Hello World", is_taken={"hello-world"}.__contains__) == "hello-world-1234"


def test_conflict_exhausted():
    calls = []

    def always_taken(slug):
        calls.append(slug)
        return True

    with pytest.raises(SlugConflictError) as exc:
        resolve_slug("Hello World", is_taken=always_taken, max_attempts=3)

    assert isinstance(exc.value, SlugError)
    assert exc.value.slug == "hello-world"
    assert exc.value.attempts == 3
    assert len(calls) == 4
    assert calls[0] == "hello-world"


def test_with_random_suffix_digits():
    slug = with_random_suffix("issue", digits=2)
    prefix, number = slug.rsplit("-", 1)
    assert prefix == "issue"
    assert 10 <= int(number) <= 99


def test_with_random_suffix_default_digits():
    assert re.fullmatch(r"issue-\d{4}", with_random_suffix("issue"))
