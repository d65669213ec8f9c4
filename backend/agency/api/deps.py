"""API Dependencies — email client and admin identity.

Invariants:
    - require_admin raises AuthenticationError for a missing or invalid
      session cookie (the gate middleware normally redirects first)
"""

from fastapi import Depends, Request

from agency.config import Settings, get_settings
from agency.core.errors import AuthenticationError
from agency.infrastructure.email_client import EmailClient, build_email_client
from agency.infrastructure.security import (
    SESSION_COOKIE, SessionClaims, decode_session_token,
)


def get_email_client(settings: Settings = Depends(get_settings)) -> EmailClient:
    return build_email_client(settings)


def require_admin(
    request: Request, settings: Settings = Depends(get_settings),
) -> SessionClaims:
    claims = decode_session_token(
        request.cookies.get(SESSION_COOKIE), settings.auth_secret,
    )
    if claims is None:
        raise AuthenticationError()
    return claims
