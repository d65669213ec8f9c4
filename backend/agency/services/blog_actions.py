"""Blog Actions — public blog reads and admin blog mutations.

Invariants:
    - Public reads only ever see published posts
    - reading_time is computed from content when not supplied
    - A mutation revalidates the tags/paths of the post before AND after the
      write, only once the write has committed
    - Unknown slugs on update/delete -> NOT_FOUND; duplicate slug -> CONFLICT
"""

import logging
import math
from typing import Any

from pydantic import BaseModel, Field, field_validator
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.action_result import ActionResult
from agency.core.blog_text import calculate_reading_time
from agency.core.cache_tags import PostSnapshot, plan_post_change
from agency.core.domain_types import PostCategory
from agency.core.errors import NotFoundError
from agency.core.publication import is_published, is_scheduled, utcnow
from agency.infrastructure.render_cache import RenderCache
from agency.models.blog_post import BlogPost
from agency.repositories import blog as blog_repo
from agency.schemas.blog import (
    BlogPostCreate, BlogPostOut, BlogPostSummary, BlogPostUpdate,
)
from agency.services.actions import parse_input, run_action
from agency.services.revalidation import apply_plan

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50
_REQUIRED_FIELDS = frozenset({
    "slug", "title", "excerpt", "content", "author", "categories", "tags", "featured",
})


class BlogListQuery(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    category: PostCategory | None = None


class CategoryQuery(BaseModel):
    category: PostCategory


class SearchQuery(BaseModel):
    q: str = Field(min_length=1, max_length=100)

    @field_validator("q", mode="before")
    @classmethod
    def strip_term(cls, v):
        return v.strip() if isinstance(v, str) else v


def post_out(post: BlogPost) -> dict[str, Any]:
    return BlogPostOut.model_validate(post).model_dump(mode="json")


def post_summary(post: BlogPost) -> dict[str, Any]:
    return BlogPostSummary.model_validate(post).model_dump(mode="json")


def post_snapshot(post: BlogPost) -> PostSnapshot:
    return PostSnapshot(
        slug=post.slug,
        categories=tuple(post.categories or ()),
        published=is_published(post.published_at),
    )


# ─── Public reads ────────────────────────────────────────────────

async def get_published_blog_posts(
    db: AsyncSession,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    category: str | None = None,
) -> ActionResult:
    async def operation():
        query = parse_input(
            BlogListQuery, {"page": page, "limit": limit, "category": category},
        )
        now = utcnow()
        total = await blog_repo.count_published_blog_posts(
            db, category=query.category, now=now,
        )
        posts = await blog_repo.get_published_blog_posts(
            db,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
            category=query.category,
            now=now,
        )
        return {
            "posts": [post_summary(p) for p in posts],
            "pagination": {
                "page": query.page,
                "limit": query.limit,
                "total": total,
                "total_pages": math.ceil(total / query.limit) if total else 0,
            },
        }

    return await run_action(
        "get_published_blog_posts", operation, "Failed to fetch blog posts",
    )


async def get_published_blog_post(db: AsyncSession, slug: str) -> ActionResult:
    async def operation():
        post = await blog_repo.get_published_blog_post_by_slug(db, slug)
        if post is None:
            raise NotFoundError("Blog post")
        return post_out(post)

    return await run_action(
        "get_published_blog_post", operation, "Failed to fetch blog post", slug=slug,
    )


async def get_blog_posts_by_category(db: AsyncSession, category: str) -> ActionResult:
    async def operation():
        query = parse_input(CategoryQuery, {"category": category})
        posts = await blog_repo.get_blog_posts_by_category(db, query.category)
        return [post_summary(p) for p in posts]

    return await run_action(
        "get_blog_posts_by_category", operation,
        "Failed to fetch blog posts by category",
    )


async def search_blog_posts(db: AsyncSession, term: str | None) -> ActionResult:
    async def operation():
        query = parse_input(SearchQuery, {"q": term or ""})
        posts = await blog_repo.search_blog_posts(db, query.q)
        return [post_summary(p) for p in posts]

    return await run_action(
        "search_blog_posts", operation, "Failed to search blog posts",
    )


# ─── Admin ───────────────────────────────────────────────────────

async def list_blog_posts_admin(db: AsyncSession) -> ActionResult:
    async def operation():
        posts = await blog_repo.list_all_blog_posts(db)
        return [
            {**post_summary(p), "status": _status_label(p)} for p in posts
        ]

    return await run_action(
        "list_blog_posts_admin", operation, "Failed to fetch blog posts",
    )


def _status_label(post: BlogPost) -> str:
    if is_scheduled(post.published_at):
        return "scheduled"
    return "published" if is_published(post.published_at) else "draft"


async def create_blog_post(
    db: AsyncSession, cache: RenderCache, raw: Any,
) -> ActionResult:
    async def operation():
        payload = parse_input(BlogPostCreate, raw)
        data = payload.model_dump()
        if data["reading_time"] is None:
            data["reading_time"] = calculate_reading_time(data["content"]) or None
        post = await blog_repo.create_blog_post(db, data)
        apply_plan(cache, plan_post_change(None, post_snapshot(post)))
        logger.info(f"Blog post created: {post.slug}", extra={"slug": post.slug})
        return post_out(post)

    return await run_action(
        "create_blog_post", operation, "Failed to create blog post",
    )


async def update_blog_post(
    db: AsyncSession, cache: RenderCache, slug: str, raw: Any,
) -> ActionResult:
    async def operation():
        payload = parse_input(BlogPostUpdate, raw)
        post = await blog_repo.get_blog_post_by_slug(db, slug)
        if post is None:
            raise NotFoundError("Blog post")
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key not in _REQUIRED_FIELDS
        }
        if "content" in changes and "reading_time" not in changes:
            changes["reading_time"] = calculate_reading_time(changes["content"]) or None
        before = post_snapshot(post)
        post = await blog_repo.update_blog_post(db, post, changes)
        apply_plan(cache, plan_post_change(before, post_snapshot(post)))
        logger.info(f"Blog post updated: {post.slug}", extra={"slug": post.slug})
        return post_out(post)

    return await run_action(
        "update_blog_post", operation, "Failed to update blog post", slug=slug,
    )


async def delete_blog_post(
    db: AsyncSession, cache: RenderCache, slug: str,
) -> ActionResult:
    async def operation():
        post = await blog_repo.get_blog_post_by_slug(db, slug)
        if post is None:
            raise NotFoundError("Blog post")
        before = post_snapshot(post)
        await blog_repo.delete_blog_post(db, post)
        apply_plan(cache, plan_post_change(before, None))
        logger.info(f"Blog post deleted: {slug}", extra={"slug": slug})
        return {"slug": slug}

    return await run_action(
        "delete_blog_post", operation, "Failed to delete blog post", slug=slug,
    )
