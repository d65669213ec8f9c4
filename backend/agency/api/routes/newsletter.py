"""Newsletter API — subscribe, status check and unsubscribe (action envelope)."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from agency.api.responses import envelope_response
from agency.infrastructure.database import get_db
from agency.services import newsletter_actions

router = APIRouter(prefix="/api/newsletter", tags=["newsletter"])


@router.post("")
async def subscribe(body: Any = Body(None), db: AsyncSession = Depends(get_db)):
    result = await newsletter_actions.subscribe_to_newsletter(db, body)
    return envelope_response(result, success_status=201)


@router.get("/status")
async def subscription_status(
    email: str | None = Query(None), db: AsyncSession = Depends(get_db),
):
    return envelope_response(
        await newsletter_actions.check_email_subscription(db, email),
    )


@router.delete("")
async def unsubscribe(
    email: str | None = Query(None), db: AsyncSession = Depends(get_db),
):
    return envelope_response(
        await newsletter_actions.unsubscribe_from_newsletter(db, email),
    )
