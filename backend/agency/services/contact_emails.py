"""Contact Emails — best-effort confirmation and agency notification.

Invariants:
    - Never raises: each send is guarded on its own, failures are logged and
      collected in the report
    - The confirmation failing does not prevent the notification attempt
    - Works from a plain dict snapshot of the submission (the request's DB
      session is closed by the time a background send runs)
    - Without an API key nothing is sent and a warning is logged
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from agency.core.domain_types import (
    BUDGET_RANGE_LABELS, PROJECT_TYPE_LABELS, BudgetRange, ProjectType,
)
from agency.infrastructure.email_client import EmailClient, render_template

logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "Thank You for Contacting AI1 - We'll Respond Within 6 Hours!"


@dataclass
class ContactEmailReport:
    confirmation_sent: bool = False
    notification_sent: bool = False
    errors: list[str] = field(default_factory=list)


def _received_at(value: Any) -> str:
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M UTC")
    return str(value)


async def send_contact_emails(
    client: EmailClient,
    submission: dict[str, Any],
    agency_email: str,
    site_url: str,
) -> ContactEmailReport:
    report = ContactEmailReport()
    if not client.configured:
        message = "Email service is not configured. Please set RESEND_API_KEY."
        logger.warning(message)
        report.errors.append(message)
        return report

    try:
        html = render_template(
            "confirmation.html", {"name": submission["name"], "site_url": site_url},
        )
        await client.send(submission["email"], CONFIRMATION_SUBJECT, html)
        report.confirmation_sent = True
        logger.info(
            "Confirmation email sent to user", extra={"email": submission["email"]},
        )
    except Exception as e:
        message = f"Failed to send confirmation email: {e}"
        logger.error(message, extra={"email": submission["email"]})
        report.errors.append(message)

    try:
        html = render_template("notification.html", {
            **submission,
            "submission_id": submission["id"],
            "project_type": PROJECT_TYPE_LABELS[ProjectType(submission["project_type"])],
            "budget_range": BUDGET_RANGE_LABELS[BudgetRange(submission["budget_range"])],
            "received_at": _received_at(submission.get("created_at")),
            "site_url": site_url,
        })
        await client.send(
            agency_email,
            f"New Contact Form Submission from {submission['name']}",
            html,
            reply_to=submission["email"],
        )
        report.notification_sent = True
        logger.info("Notification email sent to agency", extra={"email": agency_email})
    except Exception as e:
        message = f"Failed to send notification email: {e}"
        logger.error(message, extra={"submission_id": str(submission["id"])})
        report.errors.append(message)

    return report
