"""ContactSubmission ORM — a lead captured by the public contact form.

Invariants:
    - Created only by the public form, always with status PENDING
    - status/notes are the only fields mutated afterwards (admin review)
    - Never deleted by this codebase
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from agency.core.domain_types import BudgetRange, ProjectType, SubmissionStatus
from agency.db.base import Base


class ContactSubmission(Base):
    """Contact form lead."""
    __tablename__ = "contact_submissions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    company: Mapped[str | None] = mapped_column(String(200), nullable=True)
    project_type: Mapped[ProjectType] = mapped_column(
        Enum(ProjectType, native_enum=False, length=30), nullable=False,
    )
    budget_range: Mapped[BudgetRange] = mapped_column(
        Enum(BudgetRange, native_enum=False, length=30), nullable=False,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[SubmissionStatus] = mapped_column(
        Enum(SubmissionStatus, native_enum=False, length=20),
        nullable=False, default=SubmissionStatus.PENDING, index=True,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
