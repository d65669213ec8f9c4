"""Sitemap — /sitemap.xml rooted at SITE_URL."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from agency.config import Settings, get_settings
from agency.infrastructure.database import get_db
from agency.infrastructure.render_cache import RenderCache, get_render_cache
from agency.services.sitemap import sitemap_xml

router = APIRouter(tags=["sitemap"])


@router.get("/sitemap.xml")
async def sitemap(
    db: AsyncSession = Depends(get_db),
    cache: RenderCache = Depends(get_render_cache),
    settings: Settings = Depends(get_settings),
):
    body = await sitemap_xml(db, cache, settings.site_url)
    return Response(content=body, media_type="application/xml")
