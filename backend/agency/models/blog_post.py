"""BlogPost ORM — a markdown article, possibly scheduled.

Invariants:
    - slug is unique and is the public identifier (/blog/{slug})
    - published_at None = draft; in the future = scheduled; <= now = published
    - categories holds PostCategory values (at least one, enforced at the boundary)

Design Decisions:
    - No persisted "published" flag: visibility is evaluated at query time
    - seo_meta is an open key/value JSON document
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from agency.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BlogPost(Base):
    """Blog post entity."""
    __tablename__ = "blog_posts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    slug: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    excerpt: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(100), nullable=False)
    author_bio: Mapped[str | None] = mapped_column(String(500), nullable=True)
    author_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    categories: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )
    featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    featured_image: Mapped[str | None] = mapped_column(
        String(500), nullable=True,
    )
    seo_meta: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    reading_time: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
