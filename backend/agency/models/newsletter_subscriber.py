"""NewsletterSubscriber ORM — one row per subscribed email.

Invariants:
    - email is unique (storage-enforced); a duplicate insert is a conflict,
      whatever the existing row's status
    - emails are stored lower-cased (normalized at the boundary)
    - new rows start ACTIVE; only ACTIVE subscribers count as subscribed
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from agency.core.domain_types import SubscriberStatus
from agency.db.base import Base


class NewsletterSubscriber(Base):
    __tablename__ = "newsletter_subscribers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    source: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[SubscriberStatus] = mapped_column(
        Enum(SubscriberStatus, native_enum=False, length=20),
        nullable=False, default=SubscriberStatus.ACTIVE, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
