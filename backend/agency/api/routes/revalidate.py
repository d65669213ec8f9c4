"""Revalidate Webhook — external, secret-protected cache invalidation.

Invariants:
    - The secret is checked before anything else; an unset REVALIDATE_SECRET
      rejects every request (401 {message: "Invalid secret"})
    - Exactly one of path / tag; neither or both -> 400
    - Success: 200 {revalidated: true, path|tag, now} with now in epoch ms
"""

import hmac
import logging
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from agency.config import Settings, get_settings
from agency.infrastructure.render_cache import RenderCache, get_render_cache
from agency.schemas.revalidate import RevalidateRequest
from agency.services.revalidation import revalidate_path, revalidate_tag

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/revalidate", tags=["revalidate"])


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def secret_matches(provided, expected: str) -> bool:
    if not expected or not isinstance(provided, str):
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())


@router.post("")
async def revalidate(
    request: Request,
    settings: Settings = Depends(get_settings),
    cache: RenderCache = Depends(get_render_cache),
):
    try:
        body = await request.json()
    except ValueError:
        return _message(400, "Invalid request body")
    if not isinstance(body, dict):
        return _message(400, "Invalid request body")

    if not secret_matches(body.get("secret"), settings.revalidate_secret):
        logger.warning("Revalidation rejected: invalid secret")
        return _message(401, "Invalid secret")

    try:
        payload = RevalidateRequest.model_validate(body)
    except PydanticValidationError:
        return _message(400, "Invalid request body")

    path = payload.path or None
    tag = payload.tag or None
    if (path is None) == (tag is None):
        return _message(400, "Provide exactly one of path or tag")

    now = int(time.time() * 1000)
    if path is not None:
        revalidate_path(cache, path)
        return {"revalidated": True, "path": path, "now": now}
    revalidate_tag(cache, tag)
    return {"revalidated": True, "tag": tag, "now": now}
