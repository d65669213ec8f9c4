"""Admin Gate Middleware — redirects /admin requests by session state.

Invariants:
    - State is derived per request from the session cookie alone
    - Decision delegated to core.access_gate.decide_admin_redirect
    - A redirect caused by an invalid or expired cookie also clears it

Design Decisions:
    - 303 See Other: a gated POST is followed by a GET of the login page
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse

from agency.config import get_settings
from agency.core.access_gate import AccessState, decide_admin_redirect, is_admin_path
from agency.infrastructure.security import SESSION_COOKIE, decode_session_token

logger = logging.getLogger(__name__)


class AdminGateMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not is_admin_path(path):
            return await call_next(request)

        token = request.cookies.get(SESSION_COOKIE)
        claims = decode_session_token(token, get_settings().auth_secret)
        state = (
            AccessState.AUTHENTICATED if claims else AccessState.UNAUTHENTICATED
        )
        target = decide_admin_redirect(path, state)
        if target is None:
            return await call_next(request)

        logger.info(
            f"Admin gate redirect {path} -> {target}", extra={"path": path},
        )
        response = RedirectResponse(target, status_code=303)
        if token and claims is None:
            response.delete_cookie(SESSION_COOKIE, path="/")
        return response
