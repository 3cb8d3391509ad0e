"""Post schemas."""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Mapping, Optional
from urllib.parse import quote

from pydantic import BaseModel

from src.core.markdown import TrustedHTML


class PostCreate(BaseModel):
    """Schema for creating or fully replacing a post."""
    slug: str
    title: str
    markdown: str


class PostSummary(BaseModel):
    """Listing projection of a post."""
    slug: str
    title: str


NEW_POST_SLUG = "new"
ADMIN_INDEX_URL = "/posts/admin"


def post_url(slug: str) -> str:
    return f"/posts/{quote(slug, safe='')}"


def edit_url(slug: str) -> str:
    return f"{ADMIN_INDEX_URL}/{quote(slug, safe='')}"


class AdminPostLink(BaseModel):
    """Admin listing entry with links to the post and its edit form."""
    slug: str
    title: str
    edit_url: str
    view_url: str

    @classmethod
    def from_summary(cls, summary: PostSummary) -> "AdminPostLink":
        return cls(
            slug=summary.slug,
            title=summary.title,
            edit_url=edit_url(summary.slug),
            view_url=post_url(summary.slug),
        )


class AdminPostIndex(BaseModel):
    new_post_url: str
    posts: List[AdminPostLink] = []


class PostRead(BaseModel):
    slug: str
    title: str
    markdown: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostView(BaseModel):
    """Rendered post as served to readers."""
    title: str
    html: TrustedHTML


class PostFormSeed(BaseModel):
    """Admin form population; ``post`` is None for a new post."""
    post: Optional[PostRead] = None


class Intent(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


REQUIRED_FIELD_MESSAGES = {
    "title": "Title is required!",
    "slug": "Slug is required!",
    "markdown": "Markdown is required!",
}


class PostFormResult(BaseModel):
    """Outcome of parsing a submitted post form.

    Exactly one of ``post`` and ``errors`` is meaningful: ``errors`` maps every
    form field to its message, or None when the field was accepted.
    """
    post: Optional[PostCreate] = None
    errors: Dict[str, Optional[str]] = {}

    @property
    def is_valid(self) -> bool:
        return self.post is not None


def parse_post_form(form: Mapping[str, object]) -> PostFormResult:
    """Check ``title``, ``slug`` and ``markdown`` independently.

    A field is accepted when it is a non-empty string. All three fields are
    always reported so a form can redisplay every message at once.
    """
    values: Dict[str, str] = {}
    errors: Dict[str, Optional[str]] = {}
    for field, message in REQUIRED_FIELD_MESSAGES.items():
        value = form.get(field)
        if isinstance(value, str) and value:
            values[field] = value
            errors[field] = None
        else:
            errors[field] = message

    if any(errors.values()):
        return PostFormResult(errors=errors)
    return PostFormResult(post=PostCreate(**values), errors=errors)


def parse_intent(raw: object, route_slug: str) -> Optional[Intent]:
    """Resolve the submitted intent; a missing one follows the route.

    Returns None for a value that names no known intent.
    """
    if raw is None or raw == "":
        return Intent.CREATE if route_slug == NEW_POST_SLUG else Intent.UPDATE
    try:
        return Intent(raw)
    except ValueError:
        return None

