"""Analytics Config — consent-gated analytics script configuration.

Invariants:
    - enabled only when GA_MEASUREMENT_ID is set AND consent is granted
    - Consent changes only through POST /api/analytics/consent
    - The measurement id is withheld while analytics is disabled
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from agency.config import Settings, get_settings
from agency.core.consent import (
    CONSENT_COOKIE, CONSENT_MAX_AGE_SECONDS, ConsentState, analytics_enabled,
    parse_consent, serialize_consent, should_show_banner,
)

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


class ConsentUpdate(BaseModel):
    granted: bool


def _config(settings: Settings, state: ConsentState) -> dict:
    enabled = analytics_enabled(settings.ga_measurement_id, state)
    return {
        "enabled": enabled,
        "measurement_id": settings.ga_measurement_id if enabled else None,
        "consent": state.value,
        "show_banner": should_show_banner(state),
    }


@router.get("")
async def analytics_config(
    request: Request, settings: Settings = Depends(get_settings),
):
    state = parse_consent(request.cookies.get(CONSENT_COOKIE))
    return _config(settings, state)


@router.post("/consent")
async def update_consent(
    body: ConsentUpdate, settings: Settings = Depends(get_settings),
):
    state = ConsentState.GRANTED if body.granted else ConsentState.DENIED
    response = JSONResponse(content=_config(settings, state))
    response.set_cookie(
        CONSENT_COOKIE,
        serialize_consent(body.granted),
        max_age=CONSENT_MAX_AGE_SECONDS,
        samesite="lax",
        path="/",
    )
    return response
