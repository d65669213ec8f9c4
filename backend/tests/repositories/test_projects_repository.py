"""Project repository — featured filter, limit, category and ordering."""

import pytest

from agency.core.domain_types import ProjectCategory
from agency.core.errors import ConflictError
from agency.repositories import projects as projects_repo
from tests.helpers import days_ago


async def test_featured_projects_newest_first_with_limit(test_db, make_project):
    for i in range(4):
        await make_project(f"featured-{i}", featured=True, created_at=days_ago(10 - i))
    await make_project("plain", featured=False, created_at=days_ago(0))

    projects = await projects_repo.find_projects(test_db, featured=True, limit=3)

    assert [p.slug for p in projects] == ["featured-3", "featured-2", "featured-1"]


async def test_category_filter(test_db, make_project):
    await make_project("shop", category=ProjectCategory.ECOMMERCE)
    await make_project("brand", category=ProjectCategory.BRANDING)

    projects = await projects_repo.get_projects_by_category(test_db, "ECOMMERCE")

    assert [p.slug for p in projects] == ["shop"]


async def test_update_changes_fields(test_db, make_project):
    project = await make_project("shop")

    updated = await projects_repo.update_project(
        test_db, project, {"title": "New Shop", "featured": True},
    )

    assert updated.title == "New Shop"
    assert (await projects_repo.get_featured_projects(test_db))[0].slug == "shop"


async def test_renaming_onto_taken_slug_conflicts(test_db, make_project):
    await make_project("taken")
    project = await make_project("mine")

    with pytest.raises(ConflictError):
        await projects_repo.update_project(test_db, project, {"slug": "taken"})
