"""Contact Actions — public contact form submission.

Invariants:
    - Persistence of the submission is the only success criterion
    - Invalid input creates no record and returns VALIDATION_ERROR details
    - Emails are sent after the commit, never inside the guarded operation:
      scheduled on BackgroundTasks when given, otherwise awaited but isolated
"""

import logging
from typing import Any

from fastapi import BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.action_result import ActionResult, ActionSuccess
from agency.infrastructure.email_client import EmailClient
from agency.repositories import contact as contact_repo
from agency.schemas.contact import ContactSubmissionCreate, ContactSubmissionOut
from agency.services.actions import parse_input, run_action
from agency.services.contact_emails import send_contact_emails

logger = logging.getLogger(__name__)


async def submit_contact_form(
    db: AsyncSession,
    raw: Any,
    email_client: EmailClient,
    agency_email: str,
    site_url: str,
    background_tasks: BackgroundTasks | None = None,
) -> ActionResult:
    async def operation():
        payload = parse_input(ContactSubmissionCreate, raw)
        submission = await contact_repo.create_contact_submission(
            db, payload.model_dump(),
        )
        logger.info(
            "Contact form submitted successfully",
            extra={"submission_id": str(submission.id), "email": submission.email},
        )
        return ContactSubmissionOut.model_validate(submission).model_dump(mode="json")

    result = await run_action(
        "submit_contact_form", operation, "Failed to submit contact form",
    )
    match result:
        case ActionSuccess(data=data):
            await _dispatch_emails(
                data, email_client, agency_email, site_url, background_tasks,
            )
    return result


async def _dispatch_emails(
    submission: dict[str, Any],
    email_client: EmailClient,
    agency_email: str,
    site_url: str,
    background_tasks: BackgroundTasks | None,
) -> None:
    if background_tasks is not None:
        background_tasks.add_task(
            send_contact_emails, email_client, submission, agency_email, site_url,
        )
        return
    try:
        await send_contact_emails(email_client, submission, agency_email, site_url)
    except Exception as e:
        logger.error(
            f"Contact emails failed: {e}",
            extra={"submission_id": submission.get("id")},
        )
