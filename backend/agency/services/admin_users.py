"""Admin User Actions — account management for the admin area.

Invariants:
    - Listing, creating and deleting accounts requires the SUPER_ADMIN role
    - An account may be updated by a SUPER_ADMIN or by its owner; only a
      SUPER_ADMIN may change a role
    - A SUPER_ADMIN cannot delete their own account
    - Permissions come from the stored account of the signed-in admin, not
      from the role captured in the session token
    - Passwords are hashed before they reach the repository and never returned

Design Decisions:
    - Session claims are passed in by the route (require_admin), so actions
      stay callable without an HTTP request
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.action_result import ActionResult
from agency.core.domain_types import AdminRole
from agency.core.errors import (
    AuthenticationError, NotFoundError, PermissionDeniedError,
)
from agency.infrastructure.security import SessionClaims, hash_password
from agency.models.admin_user import AdminUser
from agency.repositories import admin_users as admin_repo
from agency.schemas.auth import AdminUserCreate, AdminUserOut, AdminUserUpdate
from agency.services.actions import parse_input, run_action

logger = logging.getLogger(__name__)

INSUFFICIENT_PERMISSIONS = "Insufficient permissions"


def admin_user_out(user: AdminUser) -> dict[str, Any]:
    return AdminUserOut.model_validate(user).model_dump(mode="json")


async def _acting_admin(db: AsyncSession, claims: SessionClaims) -> AdminUser:
    actor = await admin_repo.get_admin_user_by_email(db, claims.email)
    if actor is None:
        raise AuthenticationError()
    return actor


async def _require_super_admin(db: AsyncSession, claims: SessionClaims) -> AdminUser:
    actor = await _acting_admin(db, claims)
    if actor.role is not AdminRole.SUPER_ADMIN:
        raise PermissionDeniedError(INSUFFICIENT_PERMISSIONS)
    return actor


async def _get_target(db: AsyncSession, user_id: UUID) -> AdminUser:
    user = await admin_repo.get_admin_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("Admin user")
    return user


async def list_admin_users(db: AsyncSession, claims: SessionClaims) -> ActionResult:
    async def operation():
        await _require_super_admin(db, claims)
        users = await admin_repo.list_admin_users(db)
        return [admin_user_out(u) for u in users]

    return await run_action(
        "list_admin_users", operation, "Failed to fetch admin users",
    )


async def create_admin_user(
    db: AsyncSession, claims: SessionClaims, raw: Any,
) -> ActionResult:
    async def operation():
        await _require_super_admin(db, claims)
        payload = parse_input(AdminUserCreate, raw)
        user = await admin_repo.create_admin_user(
            db,
            email=payload.email,
            name=payload.name,
            password_hash=hash_password(payload.password),
            role=payload.role,
        )
        logger.info(
            f"Admin user created: role={user.role.value}",
            extra={"admin_email": user.email},
        )
        return admin_user_out(user)

    return await run_action(
        "create_admin_user", operation, "Failed to create admin user",
    )


async def update_admin_user(
    db: AsyncSession, claims: SessionClaims, user_id: UUID, raw: Any,
) -> ActionResult:
    async def operation():
        actor = await _acting_admin(db, claims)
        payload = parse_input(AdminUserUpdate, raw)
        user = await _get_target(db, user_id)
        is_super = actor.role is AdminRole.SUPER_ADMIN
        if not is_super and actor.id != user.id:
            raise PermissionDeniedError(INSUFFICIENT_PERMISSIONS)
        changes = payload.model_dump(exclude_none=True)
        if not is_super and "role" in changes and changes["role"] is not user.role:
            raise PermissionDeniedError("Only a super admin can change roles")
        if "password" in changes:
            changes["password_hash"] = hash_password(changes.pop("password"))
        user = await admin_repo.update_admin_user(db, user, changes)
        logger.info(
            f"Admin user updated: {', '.join(sorted(changes)) or 'no changes'}",
            extra={"admin_email": user.email},
        )
        return admin_user_out(user)

    return await run_action(
        "update_admin_user", operation, "Failed to update admin user",
        admin_user_id=str(user_id),
    )


async def delete_admin_user(
    db: AsyncSession, claims: SessionClaims, user_id: UUID,
) -> ActionResult:
    async def operation():
        actor = await _require_super_admin(db, claims)
        if actor.id == user_id:
            raise PermissionDeniedError("Cannot delete your own account")
        user = await _get_target(db, user_id)
        await admin_repo.delete_admin_user(db, user)
        logger.info("Admin user deleted", extra={"admin_email": user.email})
        return {"id": str(user_id)}

    return await run_action(
        "delete_admin_user", operation, "Failed to delete admin user",
        admin_user_id=str(user_id),
    )
