"""Contact Repository — lead capture and admin review."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.domain_types import SubmissionStatus
from agency.models.contact_submission import ContactSubmission


async def create_contact_submission(
    db: AsyncSession, data: dict[str, Any],
) -> ContactSubmission:
    submission = ContactSubmission(**data, status=SubmissionStatus.PENDING)
    db.add(submission)
    await db.commit()
    await db.refresh(submission)
    return submission


async def get_contact_submissions(
    db: AsyncSession, status: SubmissionStatus | None = None,
) -> list[ContactSubmission]:
    query = select(ContactSubmission).order_by(ContactSubmission.created_at.desc())
    if status is not None:
        query = query.where(ContactSubmission.status == status)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_contact_submission_by_id(
    db: AsyncSession, submission_id: UUID,
) -> ContactSubmission | None:
    return await db.get(ContactSubmission, submission_id)


async def update_contact_submission(
    db: AsyncSession,
    submission: ContactSubmission,
    status: SubmissionStatus | None = None,
    notes: str | None = None,
) -> ContactSubmission:
    if status is not None:
        submission.status = status
    if notes is not None:
        submission.notes = notes
    await db.commit()
    await db.refresh(submission)
    return submission
