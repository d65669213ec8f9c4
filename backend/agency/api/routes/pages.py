"""Public Page Payloads — render-cached blog and portfolio pages.

Invariants:
    - Unknown or unpublished slug -> 404 (NotFoundError via the global handler)
    - Payloads served from the render cache until revalidated
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.domain_types import PostCategory, ProjectCategory
from agency.infrastructure.database import get_db
from agency.infrastructure.render_cache import RenderCache, get_render_cache
from agency.services import pages

router = APIRouter(tags=["pages"])


@router.get("/blog")
async def blog_index(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=50),
    category: PostCategory | None = Query(None),
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    return await pages.blog_index_page(db, cache, page, limit, category)


@router.get("/blog/{slug}")
async def blog_post(
    slug: str,
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    return await pages.blog_post_page(db, cache, slug)


@router.get("/portfolio")
async def portfolio_index(
    category: ProjectCategory | None = Query(None),
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    return await pages.portfolio_index_page(db, cache, category)


@router.get("/portfolio/{slug}")
async def portfolio_project(
    slug: str,
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
):
    return await pages.project_page(db, cache, slug)
