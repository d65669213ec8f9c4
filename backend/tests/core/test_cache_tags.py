"""Cache Tag Policy — verifies which tags and paths each mutation revalidates.

Invariants:
    - Featured flag changes revalidate projects:featured
    - Category changes revalidate both the old and the new category tag
    - Slug changes revalidate both the old and the new detail path
    - Every mutation revalidates the index path and the sitemap
"""

from agency.core.cache_tags import (
    BLOG_PUBLISHED_TAG, BLOG_TAG, PROJECTS_FEATURED_TAG, PROJECTS_TAG,
    PostSnapshot, ProjectSnapshot, plan_post_change,
    plan_project_change, post_page_tags, project_page_tags,
)


def _project(slug="shop", category="ECOMMERCE", featured=False):
    return ProjectSnapshot(slug=slug, category=category, featured=featured)


def _post(slug="hello", categories=("AI",), published=True):
    return PostSnapshot(slug=slug, categories=tuple(categories), published=published)


def test_project_create_revalidates_index_category_and_detail():
    plan = plan_project_change(None, _project())
    assert PROJECTS_TAG in plan.tags
    assert "projects:category:ECOMMERCE" in plan.tags
    assert {"/portfolio", "/portfolio/shop", "/sitemap.xml"} <= plan.paths


def test_project_create_not_featured_skips_featured_tag():
    plan = plan_project_change(None, _project(featured=False))
    assert PROJECTS_FEATURED_TAG not in plan.tags


def test_project_create_featured_revalidates_featured_tag():
    plan = plan_project_change(None, _project(featured=True))
    assert PROJECTS_FEATURED_TAG in plan.tags


def test_project_featured_flag_change_revalidates_featured_tag():
    plan = plan_project_change(_project(featured=True), _project(featured=False))
    assert PROJECTS_FEATURED_TAG in plan.tags


def test_project_update_without_featured_involvement_skips_featured_tag():
    plan = plan_project_change(_project(), _project())
    assert PROJECTS_FEATURED_TAG not in plan.tags
    assert "projects:slug:shop" in plan.tags


def test_project_category_change_revalidates_both_categories():
    plan = plan_project_change(
        _project(category="ECOMMERCE"), _project(category="BRANDING"),
    )
    assert "projects:category:ECOMMERCE" in plan.tags
    assert "projects:category:BRANDING" in plan.tags


def test_project_slug_change_revalidates_both_paths():
    plan = plan_project_change(_project(slug="old"), _project(slug="new"))
    assert {"/portfolio/old", "/portfolio/new"} <= plan.paths
    assert "projects:slug:old" in plan.tags


def test_project_delete_revalidates_old_detail():
    plan = plan_project_change(_project(featured=True), None)
    assert "/portfolio/shop" in plan.paths
    assert "projects:slug:shop" in plan.tags
    assert PROJECTS_FEATURED_TAG in plan.tags


def test_post_create_draft_skips_published_tag():
    plan = plan_post_change(None, _post(published=False))
    assert BLOG_TAG in plan.tags
    assert BLOG_PUBLISHED_TAG not in plan.tags
    assert "blog:category:AI" in plan.tags


def test_post_create_published_revalidates_published_tag():
    plan = plan_post_change(None, _post(published=True))
    assert BLOG_PUBLISHED_TAG in plan.tags
    assert {"/blog", "/blog/hello", "/sitemap.xml"} <= plan.paths


def test_post_category_change_revalidates_old_and_new():
    plan = plan_post_change(_post(categories=("AI",)), _post(categories=("SEO",)))
    assert {"blog:category:AI", "blog:category:SEO"} <= plan.tags
    assert "blog:slug:hello" in plan.tags


def test_page_tags_are_covered_by_update_plans():
    page = post_page_tags("hello", ["AI"])
    plan = plan_post_change(_post(), _post())
    assert page & plan.tags

    project_tags = project_page_tags("shop", "ECOMMERCE")
    assert project_tags <= plan_project_change(_project(), _project()).tags
