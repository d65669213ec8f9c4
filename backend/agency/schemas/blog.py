"""Blog Schemas — admin create/update payloads and public post representations.

Invariants:
    - categories: 1-5 PostCategory values; tags: <= 10
    - published_at optional: omitted = draft, future = scheduled
    - BlogPostUpdate: every field optional, same per-field rules
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from agency.core.domain_types import PostCategory
from agency.schemas.common import Slug, UrlStr, blank_to_none


class BlogPostCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    slug: Slug
    title: str = Field(min_length=1, max_length=200)
    excerpt: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1)
    author: str = Field(min_length=1, max_length=100)
    author_bio: str | None = Field(None, max_length=500)
    author_image: UrlStr | None = None
    categories: list[PostCategory] = Field(min_length=1, max_length=5)
    tags: list[str] = Field(default_factory=list, max_length=10)
    published_at: datetime | None = None
    featured: bool = False
    featured_image: UrlStr | None = None
    seo_meta: dict[str, Any] | None = None
    reading_time: int | None = Field(None, gt=0)

    @field_validator("author_bio", "author_image", "featured_image", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)


class BlogPostUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    slug: Slug | None = None
    title: str | None = Field(None, min_length=1, max_length=200)
    excerpt: str | None = Field(None, min_length=1, max_length=500)
    content: str | None = Field(None, min_length=1)
    author: str | None = Field(None, min_length=1, max_length=100)
    author_bio: str | None = Field(None, max_length=500)
    author_image: UrlStr | None = None
    categories: list[PostCategory] | None = Field(None, min_length=1, max_length=5)
    tags: list[str] | None = Field(None, max_length=10)
    published_at: datetime | None = None
    featured: bool | None = None
    featured_image: UrlStr | None = None
    seo_meta: dict[str, Any] | None = None
    reading_time: int | None = Field(None, gt=0)

    @field_validator("author_bio", "author_image", "featured_image", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)


class BlogPostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    slug: str
    title: str
    excerpt: str
    content: str
    author: str
    author_bio: str | None
    author_image: str | None
    categories: list[PostCategory]
    tags: list[str]
    published_at: datetime | None
    featured: bool
    featured_image: str | None
    seo_meta: dict[str, Any] | None
    reading_time: int | None
    created_at: datetime
    updated_at: datetime


class BlogPostSummary(BaseModel):
    """List-view representation — no body content."""
    model_config = ConfigDict(from_attributes=True)

    slug: str
    title: str
    excerpt: str
    author: str
    categories: list[PostCategory]
    tags: list[str]
    published_at: datetime | None
    featured: bool
    featured_image: str | None
    reading_time: int | None
