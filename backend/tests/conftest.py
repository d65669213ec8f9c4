"""Root conftest — environment defaults and shared DB / HTTP fixtures.

Invariants:
    - Environment set before any agency import (get_settings is cached)
    - Every test gets a fresh in-memory SQLite database and a fresh render cache
    - get_db, get_render_cache and get_email_client overridden on the app
    - db_manager patched so code using it directly hits the test database
    - Email goes to an httpx.MockTransport outbox, never the network

Design Decisions:
    - SQLite in-memory: fast, no external dependency; queries are written to
      behave the same on PostgreSQL
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REVALIDATE_SECRET", "test-revalidate-secret")
os.environ.setdefault("AUTH_SECRET", "test-auth-secret")
os.environ.setdefault("SITE_URL", "https://ai1.test")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.pop("RESEND_API_KEY", None)
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

import json  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from agency.api.deps import get_email_client  # noqa: E402
from agency.core.domain_types import AdminRole, PostCategory, ProjectCategory  # noqa: E402
from agency.db.base import Base  # noqa: E402
from agency.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
import agency.infrastructure.database as db_module  # noqa: E402
from agency.infrastructure.email_client import EmailClient  # noqa: E402
from agency.infrastructure.render_cache import RenderCache, get_render_cache  # noqa: E402
from agency.infrastructure.security import hash_password  # noqa: E402
from agency.main import app  # noqa: E402
from agency.models import AdminUser, BlogPost, Project  # noqa: E402
from tests.helpers import (  # noqa: E402
    ADMIN_EMAIL, ADMIN_PASSWORD, SUPER_ADMIN_EMAIL, days_ago, session_cookie,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def render_cache():
    return RenderCache()


class Outbox:
    """Records Resend API calls; recipients in fail_for get a 500."""

    def __init__(self):
        self.sent: list[dict] = []
        self.fail_for: set[str] = set()

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        if set(payload["to"]) & self.fail_for:
            return httpx.Response(500, json={"message": "provider down"})
        self.sent.append(payload)
        return httpx.Response(200, json={"id": f"email_{len(self.sent)}"})

    def to(self, address: str) -> list[dict]:
        return [m for m in self.sent if address in m["to"]]


@pytest.fixture
def outbox():
    return Outbox()


@pytest.fixture
def email_client(outbox):
    return EmailClient(
        api_key="re_test_key",
        from_email="noreply@example.com",
        transport=httpx.MockTransport(outbox.handler),
    )


@pytest.fixture
async def client(test_engine, test_session_factory, render_cache, email_client):
    """FastAPI test client with DB, cache and email dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_render_cache] = lambda: render_cache
    app.dependency_overrides[get_email_client] = lambda: email_client

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def admin_user(test_db):
    user = AdminUser(
        email=ADMIN_EMAIL,
        name="Site Admin",
        password_hash=hash_password(ADMIN_PASSWORD),
        role=AdminRole.ADMIN,
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def admin_client(client):
    """Same app and overrides as `client`, with a valid session cookie."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies=session_cookie(),
    ) as c:
        yield c


@pytest.fixture
async def super_admin(test_db):
    user = AdminUser(
        email=SUPER_ADMIN_EMAIL,
        name="Site Owner",
        password_hash=hash_password(ADMIN_PASSWORD),
        role=AdminRole.SUPER_ADMIN,
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def super_admin_client(client, super_admin):
    """Signed in as the SUPER_ADMIN account."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies=session_cookie(SUPER_ADMIN_EMAIL, role=AdminRole.SUPER_ADMIN),
    ) as c:
        yield c


# ─── Content factories ───────────────────────────────────────────

@pytest.fixture
def make_post(test_db):
    async def _make(slug: str, **overrides) -> BlogPost:
        data = {
            "slug": slug,
            "title": slug.replace("-", " ").title(),
            "excerpt": f"Excerpt for {slug}",
            "content": f"## Intro\n\nBody of {slug}.\n",
            "author": "Jane Developer",
            "categories": [PostCategory.WEB_DEVELOPMENT.value],
            "tags": [],
            "published_at": days_ago(1),
        }
        data.update(overrides)
        post = BlogPost(**data)
        test_db.add(post)
        await test_db.commit()
        await test_db.refresh(post)
        return post

    return _make


@pytest.fixture
def make_project(test_db):
    async def _make(slug: str, **overrides) -> Project:
        data = {
            "slug": slug,
            "title": slug.replace("-", " ").title(),
            "description": f"Case study for {slug}",
            "category": ProjectCategory.WEB_DEVELOPMENT,
            "technologies": ["Python"],
            "images": [],
            "featured": False,
        }
        data.update(overrides)
        project = Project(**data)
        test_db.add(project)
        await test_db.commit()
        await test_db.refresh(project)
        return project

    return _make
