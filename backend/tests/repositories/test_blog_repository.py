"""Blog repository — publication filter, ordering, category match and search.

Invariants:
    - Drafts and scheduled posts never appear in public queries
    - Newest published first
"""

from datetime import timedelta

import pytest

from agency.core.errors import ConflictError
from agency.repositories import blog as blog_repo
from tests.helpers import days_ago


async def test_only_published_posts_are_listed(test_db, make_post):
    await make_post("live")
    await make_post("draft", published_at=None)
    await make_post("scheduled", published_at=days_ago(-2))

    posts = await blog_repo.get_published_blog_posts(test_db)

    assert [p.slug for p in posts] == ["live"]
    assert await blog_repo.count_published_blog_posts(test_db) == 1


async def test_published_posts_newest_first_with_paging(test_db, make_post):
    await make_post("oldest", published_at=days_ago(30))
    await make_post("newest", published_at=days_ago(1))
    await make_post("middle", published_at=days_ago(10))

    first_page = await blog_repo.get_published_blog_posts(test_db, limit=2)
    second_page = await blog_repo.get_published_blog_posts(test_db, limit=2, offset=2)

    assert [p.slug for p in first_page] == ["newest", "middle"]
    assert [p.slug for p in second_page] == ["oldest"]


async def test_published_lookup_hides_scheduled_post(test_db, make_post):
    await make_post("later", published_at=days_ago(-1))

    assert await blog_repo.get_published_blog_post_by_slug(test_db, "later") is None
    assert await blog_repo.get_blog_post_by_slug(test_db, "later") is not None


async def test_category_filter_matches_any_listed_category(test_db, make_post):
    await make_post("ai-and-seo", categories=["AI", "SEO"])
    await make_post("games", categories=["GAME_DEV"])

    posts = await blog_repo.get_blog_posts_by_category(test_db, "SEO")

    assert [p.slug for p in posts] == ["ai-and-seo"]
    assert await blog_repo.count_published_blog_posts(test_db, category="GAME_DEV") == 1


async def test_search_is_case_insensitive_across_fields(test_db, make_post):
    await make_post("by-title", title="Scaling Postgres")
    await make_post("by-body", content="We tuned POSTGRES indexes.")
    await make_post("other", title="Branding basics")
    await make_post("hidden", title="Postgres draft", published_at=None)

    posts = await blog_repo.search_blog_posts(test_db, "postgres")

    assert {p.slug for p in posts} == {"by-title", "by-body"}


async def test_search_treats_wildcards_literally(test_db, make_post):
    await make_post("plain", title="Plain title")

    assert await blog_repo.search_blog_posts(test_db, "%") == []
    assert await blog_repo.search_blog_posts(test_db, "   ") == []


async def test_related_posts_share_a_category_and_exclude_self(test_db, make_post):
    post = await make_post("main", categories=["AI"])
    await make_post("sibling", categories=["SEO", "AI"])
    await make_post("unrelated", categories=["GAME_DEV"])
    await make_post("sibling-draft", categories=["AI"], published_at=None)

    related = await blog_repo.get_related_blog_posts(test_db, post)

    assert [p.slug for p in related] == ["sibling"]


async def test_duplicate_slug_raises_conflict(test_db, make_post):
    await make_post("taken")

    with pytest.raises(ConflictError):
        await blog_repo.create_blog_post(test_db, {
            "slug": "taken", "title": "T", "excerpt": "E", "content": "C",
            "author": "A", "categories": ["AI"], "tags": [],
        })


async def test_next_scheduled_publish_is_the_earliest_future_date(test_db, make_post):
    soon = days_ago(-1)
    await make_post("live")
    await make_post("draft", published_at=None)
    await make_post("later", published_at=days_ago(-5), categories=["AI"])
    await make_post("soon", published_at=soon, categories=["SEO"])

    next_publish = await blog_repo.next_scheduled_publish_at(test_db)
    assert abs(next_publish - soon) < timedelta(seconds=1)
    ai_next = await blog_repo.next_scheduled_publish_at(test_db, category="AI")
    assert ai_next > soon
    assert await blog_repo.next_scheduled_publish_at(test_db, category="GAME_DEV") is None
