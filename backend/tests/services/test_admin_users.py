"""Admin user management — role checks and password handling.

Invariants:
    - Only a SUPER_ADMIN lists, creates or deletes accounts
    - An admin may edit their own account but not their own role
    - A SUPER_ADMIN cannot delete their own account
    - Roles are read from the stored account, not the session token
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from agency.core.action_result import ActionSuccess, FailureCode
from agency.core.domain_types import AdminRole
from agency.infrastructure.security import SessionClaims, verify_password
from agency.repositories import admin_users as admin_repo
from agency.services import admin_users
from tests.helpers import ADMIN_EMAIL, SUPER_ADMIN_EMAIL

EXPIRES = datetime.now(timezone.utc) + timedelta(hours=1)
SUPER = SessionClaims(SUPER_ADMIN_EMAIL, AdminRole.SUPER_ADMIN.value, EXPIRES)
ADMIN = SessionClaims(ADMIN_EMAIL, AdminRole.ADMIN.value, EXPIRES)

EDITOR = {
    "email": "Editor@Example.com",
    "name": "  Ed Itor ",
    "password": "long-enough-pw",
    "role": "EDITOR",
}


async def test_super_admin_creates_and_lists_accounts(test_db, super_admin, admin_user):
    created = await admin_users.create_admin_user(test_db, SUPER, EDITOR)

    assert isinstance(created, ActionSuccess)
    assert created.data["email"] == "editor@example.com"
    assert created.data["name"] == "Ed Itor"
    assert "password_hash" not in created.data
    stored = await admin_repo.get_admin_user_by_email(test_db, "editor@example.com")
    assert verify_password("long-enough-pw", stored.password_hash)

    listed = await admin_users.list_admin_users(test_db, SUPER)
    assert len(listed.data) == 3


async def test_duplicate_email_conflicts(test_db, super_admin):
    await admin_users.create_admin_user(test_db, SUPER, EDITOR)

    again = await admin_users.create_admin_user(test_db, SUPER, EDITOR)

    assert again.code is FailureCode.CONFLICT


async def test_short_password_is_a_validation_error(test_db, super_admin):
    result = await admin_users.create_admin_user(
        test_db, SUPER, {**EDITOR, "password": "short"},
    )

    assert result.code is FailureCode.VALIDATION_ERROR
    assert "password" in result.details["validation_errors"]


async def test_plain_admin_cannot_manage_accounts(test_db, admin_user):
    assert (await admin_users.list_admin_users(test_db, ADMIN)).code is FailureCode.FORBIDDEN
    created = await admin_users.create_admin_user(test_db, ADMIN, EDITOR)
    assert created.code is FailureCode.FORBIDDEN
    assert await admin_repo.count_admin_users(test_db) == 1


async def test_stale_token_role_is_not_trusted(test_db, admin_user):
    forged = SessionClaims(ADMIN_EMAIL, AdminRole.SUPER_ADMIN.value, EXPIRES)

    result = await admin_users.list_admin_users(test_db, forged)

    assert result.code is FailureCode.FORBIDDEN


async def test_admin_edits_own_name_and_password(test_db, admin_user):
    result = await admin_users.update_admin_user(
        test_db, ADMIN, admin_user.id, {"name": "Renamed", "password": "new-password-1"},
    )

    assert result.data["name"] == "Renamed"
    stored = await admin_repo.get_admin_user_by_id(test_db, admin_user.id)
    assert verify_password("new-password-1", stored.password_hash)


async def test_admin_cannot_promote_self_or_edit_others(test_db, admin_user, super_admin):
    promote = await admin_users.update_admin_user(
        test_db, ADMIN, admin_user.id, {"role": "SUPER_ADMIN"},
    )
    other = await admin_users.update_admin_user(
        test_db, ADMIN, super_admin.id, {"name": "Hijacked"},
    )

    assert promote.code is other.code is FailureCode.FORBIDDEN
    stored = await admin_repo.get_admin_user_by_id(test_db, admin_user.id)
    assert stored.role is AdminRole.ADMIN


async def test_super_admin_changes_roles(test_db, admin_user, super_admin):
    result = await admin_users.update_admin_user(
        test_db, SUPER, admin_user.id, {"role": "EDITOR", "name": None},
    )

    assert result.data["role"] == "EDITOR"
    assert result.data["name"] == "Site Admin"


async def test_delete_rules(test_db, admin_user, super_admin):
    own = await admin_users.delete_admin_user(test_db, SUPER, super_admin.id)
    missing = await admin_users.delete_admin_user(test_db, SUPER, uuid4())
    by_admin = await admin_users.delete_admin_user(test_db, ADMIN, super_admin.id)
    deleted = await admin_users.delete_admin_user(test_db, SUPER, admin_user.id)

    assert own.code is FailureCode.FORBIDDEN
    assert missing.code is FailureCode.NOT_FOUND
    assert by_admin.code is FailureCode.FORBIDDEN
    assert deleted == ActionSuccess({"id": str(admin_user.id)})
    assert await admin_repo.count_admin_users(test_db) == 1


async def test_unknown_signed_in_account_is_unauthorized(test_db):
    result = await admin_users.list_admin_users(test_db, SUPER)

    assert result.code is FailureCode.UNAUTHORIZED
