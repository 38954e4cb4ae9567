"""FastAPI application — text services for the admin dashboard.

Endpoints:
    GET  /health           — Health check
    POST /slugify          — Title → slug (Malayalam transliteration)
    POST /clean-html       — Normalize editor HTML
    POST /slugs/resolve    — Authoritative slug with uniqueness suffix
    POST /drafts/validate  — Validate and normalize a post/webzine draft
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from webzine_cms.config import settings
from webzine_cms.models import (
    CleanHtmlRequest,
    CleanHtmlResponse,
    ContentDraft,
    ResolveSlugRequest,
    ResolveSlugResponse,
    SlugifyRequest,
    SlugifyResponse,
)
from webzine_cms.slugs import SlugConflictError, SlugError, resolve_slug
from webzine_cms.text.editor import count_words, has_text_content
from webzine_cms.text.html_clean import clean_html_content
from webzine_cms.text.slugify import slugify

app = FastAPI(
    title="Webzine CMS API",
    description="Slug and rich-text services for the publishing dashboard",
    version="0.1.0",
)

# CORS — allow the admin frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    """422 with the same {"error": ...} body as the other failures."""
    messages = [err["msg"].removeprefix("Value error, ") for err in exc.errors()]
    return JSONResponse(status_code=422, content={"error": "; ".join(messages)})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/slugify", response_model=SlugifyResponse)
def slugify_title(body: SlugifyRequest):
    """Slug for a title."""
    return SlugifyResponse(slug=slugify(body.text))


@app.post("/clean-html", response_model=CleanHtmlResponse)
def clean_html(body: CleanHtmlRequest):
    """Normalize editor HTML; callers treat has_content=false as an empty body."""
    cleaned = clean_html_content(body.html)
    return CleanHtmlResponse(
        html=cleaned,
        word_count=count_words(cleaned),
        has_content=has_text_content(cleaned),
    )


@app.post("/slugs/resolve", response_model=ResolveSlugResponse)
def resolve(body: ResolveSlugRequest):
    """Slug to store, suffixed if it collides with one of ``taken``."""
    taken = set(body.taken)
    try:
        slug = resolve_slug(body.name, body.slug, is_taken=taken.__contains__, kind=body.kind)
    except SlugConflictError as e:
        return JSONResponse(status_code=409, content={"error": str(e)})
    except SlugError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    return ResolveSlugResponse(slug=slug)


@app.post("/drafts/validate")
def validate_draft(draft: ContentDraft):
    """Echo the draft back normalized; invalid drafts fail with 422 and the form message."""
    return draft.model_dump()
