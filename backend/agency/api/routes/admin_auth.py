"""Admin Sign-in — login page, credential check and logout.

Invariants:
    - Successful login sets the session cookie (httponly, samesite=lax,
      max-age = session_max_age_seconds) and never returns the password hash
    - Failed login -> 401 envelope, no cookie
    - Logout always clears the cookie
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from agency.api.responses import envelope_response
from agency.config import Settings, get_settings
from agency.core.access_gate import ADMIN_LOGIN_PATH
from agency.core.action_result import ActionFailure, ActionSuccess
from agency.infrastructure.database import get_db
from agency.infrastructure.security import SESSION_COOKIE
from agency.services import auth

router = APIRouter(prefix="/admin", tags=["admin-auth"])


@router.get("/login")
async def login_page():
    return {"message": "Sign in to access the admin area", "action": ADMIN_LOGIN_PATH}


@router.post("/login")
async def login(
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    result = await auth.login(db, body, settings)
    match result:
        case ActionSuccess(data=data):
            response = JSONResponse(
                content=ActionSuccess({"admin": data["admin"]}).to_dict(),
            )
            response.set_cookie(
                SESSION_COOKIE,
                data["token"],
                max_age=settings.session_max_age_seconds,
                httponly=True,
                samesite="lax",
                secure=settings.session_cookie_secure,
                path="/",
            )
            return response
        case ActionFailure():
            return envelope_response(result)


@router.post("/logout")
async def logout():
    response = JSONResponse(content={"success": True, "data": None})
    response.delete_cookie(SESSION_COOKIE, path="/")
    return response
