"""Demo data — seeds once through the repositories."""

from agency.repositories import blog as blog_repo
from agency.repositories import newsletter as newsletter_repo
from agency.repositories import projects as projects_repo
from agency.seed import POSTS, PROJECTS, SUBSCRIBERS, seed


async def test_seed_populates_empty_database(test_session_factory, test_db):
    assert await seed(test_session_factory) is True

    assert len(await projects_repo.get_all_projects(test_db)) == len(PROJECTS)
    assert len(await blog_repo.list_all_blog_posts(test_db)) == len(POSTS)
    assert await newsletter_repo.count_subscribers(test_db) == len(SUBSCRIBERS)
    drafts = [p for p in POSTS if p["published_at"] is None]
    assert await blog_repo.count_published_blog_posts(test_db) == len(POSTS) - len(drafts)


async def test_seed_skips_non_empty_database(test_session_factory):
    await seed(test_session_factory)

    assert await seed(test_session_factory) is False
