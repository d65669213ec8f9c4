"""Blog API — JSON search and list endpoints (action envelope)."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from agency.api.responses import envelope_response
from agency.infrastructure.database import get_db
from agency.services import blog_actions

router = APIRouter(prefix="/api/blog", tags=["blog"])


@router.get("")
async def list_posts(
    page: int = Query(1),
    limit: int = Query(10),
    category: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return envelope_response(
        await blog_actions.get_published_blog_posts(db, page, limit, category),
    )


@router.get("/search")
async def search_posts(
    q: str | None = Query(None), db: AsyncSession = Depends(get_db),
):
    return envelope_response(await blog_actions.search_blog_posts(db, q))


@router.get("/category/{category}")
async def posts_by_category(category: str, db: AsyncSession = Depends(get_db)):
    return envelope_response(
        await blog_actions.get_blog_posts_by_category(db, category),
    )
