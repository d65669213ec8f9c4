"""Newsletter Actions — subscribe, status check and unsubscribe.

Invariants:
    - A second subscribe for the same email -> CONFLICT, no duplicate row
    - Emails are compared lower-cased
"""

import logging
from typing import Any

from pydantic import BaseModel, EmailStr, field_validator
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.action_result import ActionResult
from agency.core.errors import NotFoundError
from agency.repositories import newsletter as newsletter_repo
from agency.schemas.newsletter import NewsletterSubscribe, SubscriberOut
from agency.services.actions import parse_input, run_action

logger = logging.getLogger(__name__)


class EmailQuery(BaseModel):
    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


async def subscribe_to_newsletter(db: AsyncSession, raw: Any) -> ActionResult:
    async def operation():
        payload = parse_input(NewsletterSubscribe, raw)
        subscriber = await newsletter_repo.subscribe(db, payload.email, payload.source)
        logger.info(
            "Newsletter subscription successful", extra={"email": subscriber.email},
        )
        return SubscriberOut.model_validate(subscriber).model_dump(mode="json")

    return await run_action(
        "subscribe_to_newsletter", operation, "Failed to subscribe to newsletter",
    )


async def check_email_subscription(db: AsyncSession, email: str | None) -> ActionResult:
    async def operation():
        query = parse_input(EmailQuery, {"email": email})
        return await newsletter_repo.is_email_subscribed(db, query.email)

    return await run_action(
        "check_email_subscription", operation, "Failed to check subscription status",
    )


async def unsubscribe_from_newsletter(
    db: AsyncSession, email: str | None,
) -> ActionResult:
    async def operation():
        query = parse_input(EmailQuery, {"email": email})
        subscriber = await newsletter_repo.get_subscriber_by_email(db, query.email)
        if subscriber is None:
            raise NotFoundError("Subscriber")
        await newsletter_repo.delete_subscriber(db, subscriber)
        logger.info("Newsletter unsubscribe", extra={"email": query.email})
        return {"email": query.email}

    return await run_action(
        "unsubscribe_from_newsletter", operation, "Failed to unsubscribe",
    )
