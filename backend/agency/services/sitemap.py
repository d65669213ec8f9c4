"""Sitemap Service — collects published posts and projects into sitemap XML.

Invariants:
    - Drafts and scheduled posts never appear
    - Cached at /sitemap.xml, evicted by any blog or project mutation, and
      expired when the next scheduled post goes live
"""

from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.cache_tags import BLOG_TAG, PROJECTS_TAG, SITEMAP_PATH
from agency.core.publication import as_utc, seconds_until, utcnow
from agency.core.sitemap import build_sitemap, render_sitemap_xml
from agency.infrastructure.render_cache import RenderCache, Rendered
from agency.repositories import blog as blog_repo
from agency.repositories import projects as project_repo


async def sitemap_xml(db: AsyncSession, cache: RenderCache, site_url: str) -> str:
    async def render():
        now = utcnow()
        posts = await blog_repo.get_published_blog_posts(db, now=now)
        projects = await project_repo.get_all_projects(db)
        entries = build_sitemap(
            site_url,
            now,
            posts=[(p.slug, as_utc(p.updated_at)) for p in posts],
            projects=[(p.slug, as_utc(p.updated_at)) for p in projects],
        )
        next_publish = await blog_repo.next_scheduled_publish_at(db, now=now)
        return Rendered(
            render_sitemap_xml(entries),
            {BLOG_TAG, PROJECTS_TAG},
            seconds_until(next_publish, now),
        )

    return await cache.get_or_render(SITEMAP_PATH, render)
