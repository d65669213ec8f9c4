"""Page Payloads — render-cached data for the public blog and portfolio pages.

Invariants:
    - Each payload is cached under its request path + canonical query and
      tagged so that plan_post_change / plan_project_change evict it
    - A missing or unpublished slug raises NotFoundError and caches nothing
    - Post pages carry the table of contents, reading time and up to three
      related posts
    - Payloads listing published posts expire when the next scheduled post
      in their scope goes live
    - Blog index pages past the last page are served but never cached

Design Decisions:
    - Pages raise instead of returning ActionResult: the page layer renders
      not-found, the envelope is for actions
"""

import logging
import math
from typing import Any
from urllib.parse import urlencode

from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.blog_text import (
    calculate_reading_time, format_category, generate_table_of_contents,
)
from agency.core.cache_tags import (
    BLOG_INDEX_PATH, BLOG_PUBLISHED_TAG, BLOG_TAG, PORTFOLIO_INDEX_PATH,
    PROJECTS_TAG, blog_category_tag, blog_post_path, post_page_tags,
    project_category_tag, project_page_tags, project_path,
)
from agency.core.domain_types import PostCategory, ProjectCategory
from agency.core.errors import NotFoundError
from agency.core.publication import seconds_until, utcnow
from agency.infrastructure.render_cache import RenderCache, Rendered
from agency.repositories import blog as blog_repo
from agency.repositories import projects as project_repo
from agency.services.blog_actions import post_out, post_summary
from agency.services.project_actions import project_out

logger = logging.getLogger(__name__)

RELATED_POSTS_LIMIT = 3


def _canonical_query(**params: Any) -> str:
    return urlencode(sorted((k, v) for k, v in params.items() if v is not None))


async def blog_index_page(
    db: AsyncSession,
    cache: RenderCache,
    page: int = 1,
    limit: int = 10,
    category: PostCategory | None = None,
) -> dict:
    category_value = category.value if category else None

    async def render():
        now = utcnow()
        total = await blog_repo.count_published_blog_posts(db, category_value, now)
        posts = await blog_repo.get_published_blog_posts(
            db, limit=limit, offset=(page - 1) * limit,
            category=category_value, now=now,
        )
        payload = {
            "posts": [post_summary(p) for p in posts],
            "categories": [
                {"value": c.value, "label": format_category(c.value)}
                for c in PostCategory
            ],
            "active_category": category_value,
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "total_pages": math.ceil(total / limit) if total else 0,
            },
        }
        tags = {BLOG_TAG, BLOG_PUBLISHED_TAG}
        if category_value:
            tags.add(blog_category_tag(category_value))
        next_publish = await blog_repo.next_scheduled_publish_at(
            db, category_value, now,
        )
        in_range = page == 1 or page <= payload["pagination"]["total_pages"]
        return Rendered(
            payload, tags, seconds_until(next_publish, now), store=in_range,
        )

    query = _canonical_query(page=page, limit=limit, category=category_value)
    return await cache.get_or_render(BLOG_INDEX_PATH, render, query)


async def blog_post_page(db: AsyncSession, cache: RenderCache, slug: str) -> dict:
    async def render():
        now = utcnow()
        post = await blog_repo.get_published_blog_post_by_slug(db, slug, now)
        if post is None:
            raise NotFoundError("Blog post")
        related = await blog_repo.get_related_blog_posts(
            db, post, limit=RELATED_POSTS_LIMIT, now=now,
        )
        payload = {
            "post": post_out(post),
            "reading_time": post.reading_time or calculate_reading_time(post.content),
            "category_labels": [format_category(c) for c in post.categories],
            "table_of_contents": generate_table_of_contents(post.content),
            "related_posts": [post_summary(p) for p in related],
        }
        next_publish = await blog_repo.next_scheduled_publish_at(db, now=now)
        return Rendered(
            payload,
            post_page_tags(post.slug, post.categories),
            seconds_until(next_publish, now),
        )

    return await cache.get_or_render(blog_post_path(slug), render)


async def portfolio_index_page(
    db: AsyncSession,
    cache: RenderCache,
    category: ProjectCategory | None = None,
) -> dict:
    category_value = category.value if category else None

    async def render():
        projects = await project_repo.find_projects(db, category=category_value)
        payload = {
            "projects": [project_out(p) for p in projects],
            "count": len(projects),
            "active_category": category_value,
        }
        tags = {PROJECTS_TAG}
        if category_value:
            tags.add(project_category_tag(category_value))
        return payload, tags

    query = _canonical_query(category=category_value)
    return await cache.get_or_render(PORTFOLIO_INDEX_PATH, render, query)


async def project_page(db: AsyncSession, cache: RenderCache, slug: str) -> dict:
    async def render():
        project = await project_repo.get_project_by_slug(db, slug)
        if project is None:
            raise NotFoundError("Project")
        payload = {"project": project_out(project)}
        return payload, project_page_tags(project.slug, project.category.value)

    return await cache.get_or_render(project_path(slug), render)
