"""Newsletter Repository — subscriber rows keyed by lower-cased email.

Invariants:
    - subscribe on an existing email raises ConflictError (storage-enforced)
    - Emails compared lower-cased
    - is_email_subscribed is true only for an ACTIVE row
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.domain_types import SubscriberStatus
from agency.models.newsletter_subscriber import NewsletterSubscriber
from agency.repositories.base import commit_or_conflict

CONFLICT_MESSAGE = "This email is already subscribed"


async def subscribe(
    db: AsyncSession, email: str, source: str | None = None,
) -> NewsletterSubscriber:
    subscriber = NewsletterSubscriber(
        email=email.lower(), source=source, status=SubscriberStatus.ACTIVE,
    )
    db.add(subscriber)
    await commit_or_conflict(db, CONFLICT_MESSAGE)
    await db.refresh(subscriber)
    return subscriber


async def get_subscriber_by_email(
    db: AsyncSession, email: str,
) -> NewsletterSubscriber | None:
    result = await db.execute(
        select(NewsletterSubscriber).where(
            NewsletterSubscriber.email == email.lower(),
        ),
    )
    return result.scalar_one_or_none()


async def get_subscriber_by_id(
    db: AsyncSession, subscriber_id: UUID,
) -> NewsletterSubscriber | None:
    return await db.get(NewsletterSubscriber, subscriber_id)


async def is_email_subscribed(db: AsyncSession, email: str) -> bool:
    subscriber = await get_subscriber_by_email(db, email)
    return subscriber is not None and subscriber.status is SubscriberStatus.ACTIVE


async def update_subscriber_status(
    db: AsyncSession, subscriber: NewsletterSubscriber, status: SubscriberStatus,
) -> NewsletterSubscriber:
    subscriber.status = status
    await db.commit()
    await db.refresh(subscriber)
    return subscriber


async def delete_subscriber(db: AsyncSession, subscriber: NewsletterSubscriber) -> None:
    await db.delete(subscriber)
    await db.commit()


async def list_subscribers(
    db: AsyncSession, status: SubscriberStatus | None = None,
) -> list[NewsletterSubscriber]:
    query = select(NewsletterSubscriber)
    if status is not None:
        query = query.where(NewsletterSubscriber.status == status)
    result = await db.execute(
        query.order_by(NewsletterSubscriber.created_at.desc()),
    )
    return list(result.scalars().all())


async def count_subscribers(
    db: AsyncSession, status: SubscriberStatus | None = None,
) -> int:
    query = select(func.count(NewsletterSubscriber.id))
    if status is not None:
        query = query.where(NewsletterSubscriber.status == status)
    result = await db.execute(query)
    return result.scalar_one()
