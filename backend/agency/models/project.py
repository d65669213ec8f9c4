"""Project ORM — a portfolio case study.

Invariants:
    - slug is unique and is the public identifier (/portfolio/{slug})
    - technologies and images are ordered lists of strings
    - featured defaults to False

Design Decisions:
    - JSON columns for the string lists: same storage on PostgreSQL and SQLite
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, JSON, Enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from agency.core.domain_types import ProjectCategory
from agency.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Project(Base):
    """Portfolio project entity."""
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    slug: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[ProjectCategory] = mapped_column(
        Enum(ProjectCategory, native_enum=False, length=30), nullable=False,
    )
    technologies: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    client: Mapped[str | None] = mapped_column(String(200), nullable=True)
    results: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
