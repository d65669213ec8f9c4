"""Admin Actions — lead review, subscriber management and the dashboard summary.

Invariants:
    - Leads are never deleted; only status and notes change
    - An unknown status filter -> VALIDATION_ERROR, unknown lead or
      subscriber id -> NOT_FOUND
    - Subscribers can be marked ACTIVE / UNSUBSCRIBED or deleted outright
"""

import logging
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.action_result import ActionResult
from agency.core.domain_types import SubmissionStatus, SubscriberStatus
from agency.core.errors import NotFoundError
from agency.core.publication import utcnow
from agency.repositories import contact as contact_repo
from agency.repositories import dashboard as dashboard_repo
from agency.repositories import newsletter as newsletter_repo
from agency.schemas.contact import ContactSubmissionOut, LeadUpdate
from agency.schemas.newsletter import SubscriberOut, SubscriberStatusUpdate
from agency.services.actions import parse_input, run_action

logger = logging.getLogger(__name__)


class LeadFilter(BaseModel):
    status: SubmissionStatus | None = None


class SubscriberFilter(BaseModel):
    status: SubscriberStatus | None = None


def lead_out(submission) -> dict[str, Any]:
    return ContactSubmissionOut.model_validate(submission).model_dump(mode="json")


def subscriber_out(subscriber) -> dict[str, Any]:
    return SubscriberOut.model_validate(subscriber).model_dump(mode="json")


async def list_leads(db: AsyncSession, status: str | None = None) -> ActionResult:
    async def operation():
        query = parse_input(LeadFilter, {"status": status})
        leads = await contact_repo.get_contact_submissions(db, status=query.status)
        return [lead_out(lead) for lead in leads]

    return await run_action("list_leads", operation, "Failed to fetch leads")


async def update_lead(db: AsyncSession, lead_id: UUID, raw: Any) -> ActionResult:
    async def operation():
        payload = parse_input(LeadUpdate, raw)
        submission = await contact_repo.get_contact_submission_by_id(db, lead_id)
        if submission is None:
            raise NotFoundError("Lead")
        submission = await contact_repo.update_contact_submission(
            db, submission, status=payload.status, notes=payload.notes,
        )
        logger.info(
            f"Lead updated: status={submission.status.value}",
            extra={"submission_id": str(lead_id)},
        )
        return lead_out(submission)

    return await run_action(
        "update_lead", operation, "Failed to update lead",
        submission_id=str(lead_id),
    )


async def list_subscribers(
    db: AsyncSession, status: str | None = None,
) -> ActionResult:
    async def operation():
        query = parse_input(SubscriberFilter, {"status": status})
        subscribers = await newsletter_repo.list_subscribers(db, query.status)
        return {
            "subscribers": [subscriber_out(s) for s in subscribers],
            "count": len(subscribers),
        }

    return await run_action(
        "list_subscribers", operation, "Failed to fetch subscribers",
    )


async def _get_subscriber(db: AsyncSession, subscriber_id: UUID):
    subscriber = await newsletter_repo.get_subscriber_by_id(db, subscriber_id)
    if subscriber is None:
        raise NotFoundError("Subscriber")
    return subscriber


async def update_subscriber_status(
    db: AsyncSession, subscriber_id: UUID, raw: Any,
) -> ActionResult:
    async def operation():
        payload = parse_input(SubscriberStatusUpdate, raw)
        subscriber = await _get_subscriber(db, subscriber_id)
        subscriber = await newsletter_repo.update_subscriber_status(
            db, subscriber, payload.status,
        )
        logger.info(
            f"Subscriber status set to {subscriber.status.value}",
            extra={"subscriber_id": str(subscriber_id)},
        )
        return subscriber_out(subscriber)

    return await run_action(
        "update_subscriber_status", operation, "Failed to update subscriber",
        subscriber_id=str(subscriber_id),
    )


async def delete_subscriber(db: AsyncSession, subscriber_id: UUID) -> ActionResult:
    async def operation():
        subscriber = await _get_subscriber(db, subscriber_id)
        await newsletter_repo.delete_subscriber(db, subscriber)
        logger.info(
            "Subscriber deleted", extra={"subscriber_id": str(subscriber_id)},
        )
        return {"id": str(subscriber_id)}

    return await run_action(
        "delete_subscriber", operation, "Failed to delete subscriber",
        subscriber_id=str(subscriber_id),
    )


async def get_dashboard(db: AsyncSession) -> ActionResult:
    async def operation():
        counts = await dashboard_repo.get_dashboard_counts(db, utcnow())
        return {
            "projects": {
                "total": counts.total_projects,
                "featured": counts.featured_projects,
            },
            "posts": {
                "published": counts.published_posts,
                "drafts": counts.draft_posts,
            },
            "leads": {
                "total": counts.total_leads,
                "pending": counts.pending_leads,
                "recent": [lead_out(lead) for lead in counts.recent_leads],
            },
            "subscribers": {
                "total": counts.total_subscribers,
                "active": counts.active_subscribers,
            },
        }

    return await run_action("get_dashboard", operation, "Failed to fetch analytics")
