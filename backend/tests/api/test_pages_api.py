"""Public pages — render-cached payloads, 404 for unpublished content.

Invariants:
    - A cached page is served until a mutation or webhook revalidates it, or
      until the next scheduled post goes live
    - Drafts and scheduled posts are 404 and never cached
    - Blog index pages past the last page are not cached
"""

import asyncio
from datetime import datetime, timedelta, timezone

from tests.helpers import days_ago


async def test_blog_index_lists_published_posts(client, make_post):
    await make_post("live", categories=["AI"])
    await make_post("draft", published_at=None)

    response = await client.get("/blog")

    assert response.status_code == 200
    body = response.json()
    assert [p["slug"] for p in body["posts"]] == ["live"]
    assert body["pagination"]["total"] == 1
    assert {"value": "AI", "label": "AI"} in body["categories"]


async def test_blog_index_is_cached_until_revalidated(client, make_post, render_cache):
    await make_post("first")
    assert len((await client.get("/blog")).json()["posts"]) == 1

    await make_post("second")
    assert len((await client.get("/blog")).json()["posts"]) == 1

    render_cache.invalidate_tag("blog")
    assert len((await client.get("/blog")).json()["posts"]) == 2


async def test_post_page_has_toc_and_related(client, make_post):
    await make_post(
        "main", categories=["SEO"],
        content="## Why SEO\n\ntext\n\n### Crawl budget\n\nmore",
    )
    await make_post("related", categories=["SEO"])
    await make_post("unrelated", categories=["GAME_DEV"])

    body = (await client.get("/blog/main")).json()

    assert body["post"]["slug"] == "main"
    assert body["category_labels"] == ["SEO"]
    assert [h["id"] for h in body["table_of_contents"]] == ["why-seo", "crawl-budget"]
    assert [p["slug"] for p in body["related_posts"]] == ["related"]
    assert body["reading_time"] >= 1


async def test_unpublished_posts_are_404_and_not_cached(client, make_post, render_cache):
    await make_post("draft", published_at=None)
    await make_post("scheduled", published_at=days_ago(-1))

    assert (await client.get("/blog/draft")).status_code == 404
    assert (await client.get("/blog/scheduled")).status_code == 404
    assert (await client.get("/blog/missing")).status_code == 404
    assert len(render_cache) == 0


async def test_portfolio_pages(client, make_project):
    await make_project("shop", category="ECOMMERCE")
    await make_project("brand", category="BRANDING")

    index = (await client.get("/portfolio", params={"category": "ECOMMERCE"})).json()
    detail = await client.get("/portfolio/shop")

    assert [p["slug"] for p in index["projects"]] == ["shop"]
    assert detail.json()["project"]["category"] == "ECOMMERCE"
    assert (await client.get("/portfolio/missing")).status_code == 404


async def test_blog_search_and_category_api(client, make_post):
    await make_post("postgres-tips", title="Postgres Tips", categories=["WEB_DEVELOPMENT"])
    await make_post("ai-intro", title="Intro to AI", categories=["AI"])

    search = (await client.get("/api/blog/search", params={"q": "POSTGRES"})).json()
    by_category = (await client.get("/api/blog/category/AI")).json()
    bad_category = await client.get("/api/blog/category/COOKING")

    assert [p["slug"] for p in search["data"]] == ["postgres-tips"]
    assert [p["slug"] for p in by_category["data"]] == ["ai-intro"]
    assert bad_category.status_code == 400


async def test_scheduled_post_appears_on_cached_index_once_live(client, make_post):
    await make_post("old-post")
    await make_post(
        "scheduled-post",
        published_at=datetime.now(timezone.utc) + timedelta(seconds=1),
    )
    first = (await client.get("/blog")).json()
    assert [p["slug"] for p in first["posts"]] == ["old-post"]

    await asyncio.sleep(1.5)

    second = (await client.get("/blog")).json()
    assert [p["slug"] for p in second["posts"]] == ["scheduled-post", "old-post"]


async def test_related_posts_refresh_when_scheduled_post_goes_live(client, make_post):
    await make_post("main", categories=["AI"])
    await make_post(
        "follow-up", categories=["AI"],
        published_at=datetime.now(timezone.utc) + timedelta(seconds=1),
    )
    assert (await client.get("/blog/main")).json()["related_posts"] == []

    await asyncio.sleep(1.5)

    body = (await client.get("/blog/main")).json()
    assert [p["slug"] for p in body["related_posts"]] == ["follow-up"]


async def test_out_of_range_blog_pages_are_not_cached(client, make_post, render_cache):
    await make_post("only-post")

    for page in range(2, 40):
        response = await client.get("/blog", params={"page": page})
        assert response.status_code == 200
        assert response.json()["posts"] == []

    assert len(render_cache) == 0
    await client.get("/blog")
    assert len(render_cache) == 1


async def test_empty_blog_first_page_is_cached(client, render_cache):
    body = (await client.get("/blog")).json()

    assert body["pagination"]["total_pages"] == 0
    assert len(render_cache) == 1
