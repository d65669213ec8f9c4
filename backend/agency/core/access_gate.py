"""Admin Access Gate — the two-state route decision for /admin requests.

Invariants:
    - States: UNAUTHENTICATED, AUTHENTICATED — derived per request from the token alone
    - Any /admin path other than the login page, when unauthenticated -> redirect to login
    - The login page, when authenticated -> redirect to the admin home
    - Non-admin paths are never redirected
"""

from enum import Enum

ADMIN_PREFIX = "/admin"
ADMIN_LOGIN_PATH = "/admin/login"
ADMIN_HOME_PATH = "/admin"


class AccessState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


def is_admin_path(path: str) -> bool:
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + "/")


def is_login_path(path: str) -> bool:
    return path.rstrip("/") == ADMIN_LOGIN_PATH


def decide_admin_redirect(path: str, state: AccessState) -> str | None:
    """Return the redirect target, or None to let the request through."""
    if not is_admin_path(path):
        return None
    if is_login_path(path):
        return ADMIN_HOME_PATH if state is AccessState.AUTHENTICATED else None
    if state is AccessState.UNAUTHENTICATED:
        return ADMIN_LOGIN_PATH
    return None
