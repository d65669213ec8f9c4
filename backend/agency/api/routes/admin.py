"""Admin API — dashboard, content management, leads, subscribers and admin users.

Invariants:
    - Every route requires a valid session (require_admin); the gate
      middleware redirects unauthenticated requests before they get here
    - Mutations go through server actions, which revalidate after commit
    - Role checks for /admin/users happen in the actions, against the
      signed-in admin from the session claims
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from agency.api.deps import require_admin
from agency.api.responses import envelope_response
from agency.infrastructure.database import get_db
from agency.infrastructure.render_cache import RenderCache, get_render_cache
from agency.infrastructure.security import SessionClaims
from agency.services import admin_actions, admin_users, blog_actions, project_actions

router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)],
)


@router.get("")
async def dashboard(db: AsyncSession = Depends(get_db)):
    return envelope_response(await admin_actions.get_dashboard(db))


# ─── Blog ────────────────────────────────────────────────────────

@router.get("/blog")
async def list_posts(db: AsyncSession = Depends(get_db)):
    return envelope_response(await blog_actions.list_blog_posts_admin(db))


@router.post("/blog")
async def create_post(
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    result = await blog_actions.create_blog_post(db, cache, body)
    return envelope_response(result, success_status=201)


@router.put("/blog/{slug}")
async def update_post(
    slug: str,
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    return envelope_response(
        await blog_actions.update_blog_post(db, cache, slug, body),
    )


@router.delete("/blog/{slug}")
async def delete_post(
    slug: str,
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    return envelope_response(await blog_actions.delete_blog_post(db, cache, slug))


# ─── Projects ────────────────────────────────────────────────────

@router.get("/projects")
async def list_projects(db: AsyncSession = Depends(get_db)):
    return envelope_response(await project_actions.list_projects_admin(db))


@router.post("/projects")
async def create_project(
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    result = await project_actions.create_project(db, cache, body)
    return envelope_response(result, success_status=201)


@router.put("/projects/{slug}")
async def update_project(
    slug: str,
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    return envelope_response(
        await project_actions.update_project(db, cache, slug, body),
    )


@router.delete("/projects/{slug}")
async def delete_project(
    slug: str,
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    return envelope_response(
        await project_actions.delete_project(db, cache, slug),
    )


# ─── Leads & subscribers ─────────────────────────────────────────

@router.get("/leads")
async def list_leads(
    status: str | None = Query(None), db: AsyncSession = Depends(get_db),
):
    return envelope_response(await admin_actions.list_leads(db, status))


@router.patch("/leads/{lead_id}")
async def update_lead(
    lead_id: UUID,
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
):
    return envelope_response(await admin_actions.update_lead(db, lead_id, body))


@router.get("/subscribers")
async def list_subscribers(
    status: str | None = Query(None), db: AsyncSession = Depends(get_db),
):
    return envelope_response(await admin_actions.list_subscribers(db, status))


@router.patch("/subscribers/{subscriber_id}")
async def update_subscriber(
    subscriber_id: UUID,
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
):
    return envelope_response(
        await admin_actions.update_subscriber_status(db, subscriber_id, body),
    )


@router.delete("/subscribers/{subscriber_id}")
async def delete_subscriber(
    subscriber_id: UUID, db: AsyncSession = Depends(get_db),
):
    return envelope_response(
        await admin_actions.delete_subscriber(db, subscriber_id),
    )


# ─── Admin users ─────────────────────────────────────────────────

@router.get("/users")
async def list_users(
    db: AsyncSession = Depends(get_db),
    claims: SessionClaims = Depends(require_admin),
):
    return envelope_response(await admin_users.list_admin_users(db, claims))


@router.post("/users")
async def create_user(
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    claims: SessionClaims = Depends(require_admin),
):
    result = await admin_users.create_admin_user(db, claims, body)
    return envelope_response(result, success_status=201)


@router.patch("/users/{user_id}")
async def update_user(
    user_id: UUID,
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    claims: SessionClaims = Depends(require_admin),
):
    return envelope_response(
        await admin_users.update_admin_user(db, claims, user_id, body),
    )


@router.delete("/users/{user_id}")
async def delete_user(
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
    claims: SessionClaims = Depends(require_admin),
):
    return envelope_response(
        await admin_users.delete_admin_user(db, claims, user_id),
    )
