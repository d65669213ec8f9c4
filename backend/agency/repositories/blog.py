"""Blog Repository — published-post queries and admin CRUD for blog posts.

Invariants:
    - Public queries return only published posts (published_at <= now)
    - Public lists ordered by published_at desc, then created_at desc
    - get_blog_post_by_slug ignores publication state (admin use)
    - Slug uniqueness violations surface as ConflictError

Design Decisions:
    - Category membership via a text match on the JSON array ('"AI"' inside
      '["AI", "SEO"]'): identical on PostgreSQL and SQLite
    - Search is a lower()-ed substring match with LIKE wildcards escaped
"""

from datetime import datetime
from typing import Any

from sqlalchemy import Text, cast, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.domain_types import PostCategory
from agency.core.publication import as_utc, utcnow
from agency.models.blog_post import BlogPost
from agency.repositories.base import commit_or_conflict

CONFLICT_MESSAGE = "A blog post with this slug already exists"


def _category_clause(category: PostCategory | str):
    value = category.value if isinstance(category, PostCategory) else category
    return cast(BlogPost.categories, Text).like(f'%"{value}"%')


def _published_query(now: datetime | None, category: PostCategory | str | None = None):
    query = select(BlogPost).where(
        BlogPost.published_at.is_not(None),
        BlogPost.published_at <= (now or utcnow()),
    )
    if category:
        query = query.where(_category_clause(category))
    return query


def _newest_first(query):
    return query.order_by(BlogPost.published_at.desc(), BlogPost.created_at.desc())


async def get_published_blog_posts(
    db: AsyncSession,
    limit: int | None = None,
    offset: int = 0,
    category: PostCategory | str | None = None,
    now: datetime | None = None,
) -> list[BlogPost]:
    query = _newest_first(_published_query(now, category))
    if limit is not None:
        query = query.limit(limit)
    if offset:
        query = query.offset(offset)
    result = await db.execute(query)
    return list(result.scalars().all())


async def count_published_blog_posts(
    db: AsyncSession,
    category: PostCategory | str | None = None,
    now: datetime | None = None,
) -> int:
    subquery = _published_query(now, category).subquery()
    result = await db.execute(select(func.count()).select_from(subquery))
    return result.scalar_one()


async def next_scheduled_publish_at(
    db: AsyncSession,
    category: PostCategory | str | None = None,
    now: datetime | None = None,
) -> datetime | None:
    """Earliest published_at still in the future, or None when nothing is scheduled."""
    query = select(func.min(BlogPost.published_at)).where(
        BlogPost.published_at > (now or utcnow()),
    )
    if category:
        query = query.where(_category_clause(category))
    result = await db.execute(query)
    moment = result.scalar_one_or_none()
    return as_utc(moment) if moment is not None else None


async def get_blog_post_by_slug(db: AsyncSession, slug: str) -> BlogPost | None:
    result = await db.execute(select(BlogPost).where(BlogPost.slug == slug))
    return result.scalar_one_or_none()


async def get_published_blog_post_by_slug(
    db: AsyncSession, slug: str, now: datetime | None = None,
) -> BlogPost | None:
    result = await db.execute(
        _published_query(now).where(BlogPost.slug == slug),
    )
    return result.scalar_one_or_none()


async def get_blog_posts_by_category(
    db: AsyncSession, category: PostCategory | str, now: datetime | None = None,
) -> list[BlogPost]:
    return await get_published_blog_posts(db, category=category, now=now)


async def search_blog_posts(
    db: AsyncSession, term: str, now: datetime | None = None,
) -> list[BlogPost]:
    needle = term.strip().lower()
    if not needle:
        return []
    query = _published_query(now).where(or_(
        func.lower(BlogPost.title).contains(needle, autoescape=True),
        func.lower(BlogPost.excerpt).contains(needle, autoescape=True),
        func.lower(BlogPost.content).contains(needle, autoescape=True),
    ))
    result = await db.execute(_newest_first(query))
    return list(result.scalars().all())


async def get_related_blog_posts(
    db: AsyncSession, post: BlogPost, limit: int = 3, now: datetime | None = None,
) -> list[BlogPost]:
    """Published posts sharing at least one category, newest first."""
    if not post.categories:
        return []
    query = _published_query(now).where(
        BlogPost.id != post.id,
        or_(*(_category_clause(c) for c in post.categories)),
    )
    result = await db.execute(_newest_first(query).limit(limit))
    return list(result.scalars().all())


async def list_all_blog_posts(db: AsyncSession) -> list[BlogPost]:
    result = await db.execute(
        select(BlogPost).order_by(BlogPost.created_at.desc()),
    )
    return list(result.scalars().all())


def _normalize(data: dict[str, Any]) -> dict[str, Any]:
    if data.get("published_at") is not None:
        data["published_at"] = as_utc(data["published_at"])
    if data.get("categories") is not None:
        data["categories"] = [
            c.value if isinstance(c, PostCategory) else c
            for c in data["categories"]
        ]
    return data


async def create_blog_post(db: AsyncSession, data: dict[str, Any]) -> BlogPost:
    post = BlogPost(**_normalize(dict(data)))
    db.add(post)
    await commit_or_conflict(db, CONFLICT_MESSAGE)
    await db.refresh(post)
    return post


async def update_blog_post(
    db: AsyncSession, post: BlogPost, changes: dict[str, Any],
) -> BlogPost:
    for key, value in _normalize(dict(changes)).items():
        setattr(post, key, value)
    await commit_or_conflict(db, CONFLICT_MESSAGE)
    await db.refresh(post)
    return post


async def delete_blog_post(db: AsyncSession, post: BlogPost) -> None:
    await db.delete(post)
    await db.commit()
