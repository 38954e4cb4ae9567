from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from webzine_cms.text.editor import has_text_content
from webzine_cms.text.html_clean import clean_html_content
from webzine_cms.text.normalize import normalize_text
from webzine_cms.text.slugify import slugify


class ContentDraft(BaseModel):
    """Post/webzine form payload, validated the way the admin forms do before save.

    Title and content are normalized in place; a blank slug is derived from
    the title.
    """

    title: str = Field(default="", validate_default=True)
    slug: str = ""
    content: str = Field(default="", validate_default=True)
    excerpt: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def _title_required(cls, v: str) -> str:
        v = normalize_text(v)
        if not v:
            raise ValueError("Title required")
        return v

    @field_validator("content")
    @classmethod
    def _content_has_text(cls, v: str) -> str:
        v = clean_html_content(v)
        if not has_text_content(v):
            raise ValueError("Content must contain actual text.")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, v):
        # Forms send tags as "a, b, c"
        if v is None:
            return []
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return v

    @model_validator(mode="after")
    def _derive_slug(self) -> ContentDraft:
        self.slug = slugify(self.slug) if self.slug.strip() else slugify(self.title)
        if not self.slug:
            raise ValueError("Slug cannot be empty.")
        return self


class SlugifyRequest(BaseModel):
    text: str | None = None


class SlugifyResponse(BaseModel):
    slug: str


class CleanHtmlRequest(BaseModel):
    html: str | None = None


class CleanHtmlResponse(BaseModel):
    html: str
    word_count: int
    has_content: bool


class ResolveSlugRequest(BaseModel):
    name: str | None = None
    slug: str | None = None
    # Slugs already present in the store for this collection
    taken: list[str] = Field(default_factory=list)
    kind: str = "item"


class ResolveSlugResponse(BaseModel):
    slug: str
