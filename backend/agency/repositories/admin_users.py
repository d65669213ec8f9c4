"""Admin User Repository — credential lookup and admin account CRUD.

Invariants:
    - Emails stored and compared lower-cased
    - Duplicate email on create or update raises ConflictError
"""

from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.domain_types import AdminRole
from agency.models.admin_user import AdminUser
from agency.repositories.base import commit_or_conflict

CONFLICT_MESSAGE = "An admin with this email already exists"


async def get_admin_user_by_email(db: AsyncSession, email: str) -> AdminUser | None:
    result = await db.execute(
        select(AdminUser).where(AdminUser.email == email.strip().lower()),
    )
    return result.scalar_one_or_none()


async def get_admin_user_by_id(db: AsyncSession, user_id: UUID) -> AdminUser | None:
    return await db.get(AdminUser, user_id)


async def list_admin_users(db: AsyncSession) -> list[AdminUser]:
    result = await db.execute(
        select(AdminUser).order_by(AdminUser.created_at.desc()),
    )
    return list(result.scalars().all())


async def create_admin_user(
    db: AsyncSession,
    email: str,
    name: str,
    password_hash: str,
    role: AdminRole = AdminRole.EDITOR,
) -> AdminUser:
    user = AdminUser(
        email=email.strip().lower(), name=name,
        password_hash=password_hash, role=role,
    )
    db.add(user)
    await commit_or_conflict(db, CONFLICT_MESSAGE)
    await db.refresh(user)
    return user


async def update_admin_user(
    db: AsyncSession, user: AdminUser, changes: dict[str, Any],
) -> AdminUser:
    for key, value in changes.items():
        if key == "email":
            value = value.strip().lower()
        setattr(user, key, value)
    await commit_or_conflict(db, CONFLICT_MESSAGE)
    await db.refresh(user)
    return user


async def delete_admin_user(db: AsyncSession, user: AdminUser) -> None:
    await db.delete(user)
    await db.commit()


async def count_admin_users(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(AdminUser.id)))
    return result.scalar_one()
