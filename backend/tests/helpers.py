"""Plain helpers shared by test modules (fixtures live in conftest)."""

from datetime import datetime, timedelta, timezone

from agency.config import get_settings
from agency.core.domain_types import AdminRole
from agency.infrastructure.security import SESSION_COOKIE, create_session_token

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct-horse-battery"
SUPER_ADMIN_EMAIL = "owner@example.com"


def days_ago(days: float) -> datetime:
    """Negative values give a time in the future."""
    return datetime.now(timezone.utc) - timedelta(days=days)


def session_cookie(
    email: str = ADMIN_EMAIL,
    max_age_seconds: int = 3600,
    now: datetime | None = None,
    role: AdminRole = AdminRole.ADMIN,
) -> dict[str, str]:
    token = create_session_token(
        email, role.value, get_settings().auth_secret,
        max_age_seconds, now=now,
    )
    return {SESSION_COOKIE: token}
