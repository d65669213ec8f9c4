"""Project Schemas — admin create/update payloads and the public representation.

Invariants:
    - slug: lowercase alphanumeric words joined by single hyphens, <= 100 chars
    - technologies: 1-20 entries; images: <= 20 absolute http(s) URLs
    - ProjectUpdate: every field optional, same per-field rules
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from agency.core.domain_types import ProjectCategory
from agency.schemas.common import Slug, UrlStr, blank_to_none


class ProjectCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    slug: Slug
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=5000)
    category: ProjectCategory
    technologies: list[str] = Field(min_length=1, max_length=20)
    images: list[UrlStr] = Field(default_factory=list, max_length=20)
    client: str | None = Field(None, max_length=200)
    results: str | None = Field(None, max_length=2000)
    featured: bool = False

    @field_validator("client", "results", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)


class ProjectUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    slug: Slug | None = None
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1, max_length=5000)
    category: ProjectCategory | None = None
    technologies: list[str] | None = Field(None, min_length=1, max_length=20)
    images: list[UrlStr] | None = Field(None, max_length=20)
    client: str | None = Field(None, max_length=200)
    results: str | None = Field(None, max_length=2000)
    featured: bool | None = None

    @field_validator("client", "results", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)


class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    slug: str
    title: str
    description: str
    category: ProjectCategory
    technologies: list[str]
    images: list[str]
    client: str | None
    results: str | None
    featured: bool
    created_at: datetime
    updated_at: datetime
