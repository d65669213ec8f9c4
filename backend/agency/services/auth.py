"""Admin Auth — credential check, session issuance and bootstrap admin.

Invariants:
    - Unauthenticated -> Authenticated only through login() succeeding
    - Unknown email and wrong password produce the same failure message
    - bootstrap_admin creates a user only when none exists and both
      ADMIN_EMAIL and ADMIN_PASSWORD are configured
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from agency.config import Settings
from agency.core.action_result import ActionResult
from agency.core.domain_types import AdminRole
from agency.core.errors import AuthenticationError
from agency.infrastructure.security import (
    create_session_token, hash_password, verify_password,
)
from agency.models.admin_user import AdminUser
from agency.repositories import admin_users as admin_repo
from agency.schemas.auth import AdminIdentity, LoginRequest
from agency.services.actions import parse_input, run_action

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


async def login(db: AsyncSession, raw: Any, settings: Settings) -> ActionResult:
    async def operation():
        credentials = parse_input(LoginRequest, raw)
        user = await admin_repo.get_admin_user_by_email(db, credentials.email)
        if user is None or not verify_password(credentials.password, user.password_hash):
            raise AuthenticationError(INVALID_CREDENTIALS)
        token = create_session_token(
            user.email, user.role.value, settings.auth_secret,
            settings.session_max_age_seconds,
        )
        logger.info("Admin signed in", extra={"admin_email": user.email})
        return {
            "token": token,
            "admin": AdminIdentity.model_validate(user).model_dump(mode="json"),
        }

    return await run_action("login", operation, "Failed to sign in")


async def bootstrap_admin(db: AsyncSession, settings: Settings) -> AdminUser | None:
    if not settings.admin_email or not settings.admin_password:
        return None
    if await admin_repo.count_admin_users(db) > 0:
        return None
    user = await admin_repo.create_admin_user(
        db,
        email=settings.admin_email,
        name=settings.admin_name,
        password_hash=hash_password(settings.admin_password),
        role=AdminRole.SUPER_ADMIN,
    )
    logger.info("Bootstrap admin created", extra={"admin_email": user.email})
    return user
