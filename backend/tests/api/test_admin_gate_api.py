"""Admin gate — unauthenticated /admin requests redirect to the login page.

Invariants:
    - No cookie -> 303 to /admin/login
    - Valid cookie on /admin/login -> 303 to /admin
    - Expired cookie -> redirect and the cookie is cleared
    - Public paths are never gated
"""

from datetime import datetime, timedelta, timezone

from agency.infrastructure.security import SESSION_COOKIE
from tests.helpers import session_cookie


async def test_unauthenticated_admin_request_redirects_to_login(client):
    response = await client.get("/admin/blog")

    assert response.status_code == 303
    assert response.headers["location"] == "/admin/login"


async def test_login_page_is_reachable_without_session(client):
    response = await client.get("/admin/login")

    assert response.status_code == 200


async def test_authenticated_login_page_redirects_home(admin_client):
    response = await admin_client.get("/admin/login")

    assert response.status_code == 303
    assert response.headers["location"] == "/admin"


async def test_expired_cookie_redirects_and_is_cleared(client):
    issued = datetime.now(timezone.utc) - timedelta(days=2)
    client.cookies.update(session_cookie(max_age_seconds=60, now=issued))

    response = await client.get("/admin")

    assert response.status_code == 303
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{SESSION_COOKIE}=")
    assert "Max-Age=0" in set_cookie


async def test_tampered_cookie_is_unauthenticated(client):
    client.cookies.set(SESSION_COOKIE, "forged.token.value")

    response = await client.get("/admin/projects")

    assert response.status_code == 303


async def test_public_paths_are_not_gated(client):
    response = await client.get("/api/analytics")

    assert response.status_code == 200
