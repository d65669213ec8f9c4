"""Contact API — public contact form endpoint (action envelope)."""

from typing import Any

from fastapi import APIRouter, BackgroundTasks, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agency.api.deps import get_email_client
from agency.api.responses import envelope_response
from agency.config import Settings, get_settings
from agency.infrastructure.database import get_db
from agency.infrastructure.email_client import EmailClient
from agency.services import contact_actions

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("")
async def submit_contact(
    background_tasks: BackgroundTasks,
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    email_client: EmailClient = Depends(get_email_client),
):
    result = await contact_actions.submit_contact_form(
        db,
        body,
        email_client=email_client,
        agency_email=settings.agency_email,
        site_url=settings.site_url,
        background_tasks=background_tasks,
    )
    return envelope_response(result, success_status=201)
