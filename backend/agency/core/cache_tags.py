"""Cache Tag Policy — which rendered outputs a content mutation makes stale.

Invariants:
    - Pure: computes tags/paths from before/after snapshots, never touches the cache
    - Every page payload is tagged with the tags produced here, so a plan
      computed for a mutation covers every cached render of the affected entity
    - Tags are strings: "<entity>", "<entity>:<facet>" or "<entity>:<facet>:<value>"

Design Decisions:
    - Snapshots (ProjectSnapshot / PostSnapshot) instead of ORM objects: the
      "before" state must survive the ORM object being mutated in place
"""

from dataclasses import dataclass, field
from typing import Iterable

from agency.core.domain_types import PostCategory, ProjectCategory

BLOG_TAG = "blog"
BLOG_PUBLISHED_TAG = "blog:published"
PROJECTS_TAG = "projects"
PROJECTS_FEATURED_TAG = "projects:featured"

BLOG_INDEX_PATH = "/blog"
PORTFOLIO_INDEX_PATH = "/portfolio"
SITEMAP_PATH = "/sitemap.xml"


def blog_category_tag(category: PostCategory | str) -> str:
    return f"blog:category:{_value(category)}"


def blog_slug_tag(slug: str) -> str:
    return f"blog:slug:{slug}"


def project_category_tag(category: ProjectCategory | str) -> str:
    return f"projects:category:{_value(category)}"


def project_slug_tag(slug: str) -> str:
    return f"projects:slug:{slug}"


def blog_post_path(slug: str) -> str:
    return f"{BLOG_INDEX_PATH}/{slug}"


def project_path(slug: str) -> str:
    return f"{PORTFOLIO_INDEX_PATH}/{slug}"


def _value(item) -> str:
    return item.value if hasattr(item, "value") else str(item)


@dataclass(frozen=True)
class ProjectSnapshot:
    slug: str
    category: str
    featured: bool


@dataclass(frozen=True)
class PostSnapshot:
    slug: str
    categories: tuple[str, ...]
    published: bool


@dataclass(frozen=True)
class RevalidationPlan:
    """Tags and paths to invalidate, applied only after a successful commit."""
    tags: frozenset[str] = field(default_factory=frozenset)
    paths: frozenset[str] = field(default_factory=frozenset)


# ─── Projects ────────────────────────────────────────────────────

def plan_project_change(
    before: ProjectSnapshot | None, after: ProjectSnapshot | None,
) -> RevalidationPlan:
    """Create (before=None), update (both), or delete (after=None)."""
    tags = {PROJECTS_TAG}
    paths = {PORTFOLIO_INDEX_PATH, SITEMAP_PATH}
    snapshots = [s for s in (before, after) if s is not None]
    for snap in snapshots:
        tags.add(project_category_tag(snap.category))
        if before is not None:
            tags.add(project_slug_tag(snap.slug))
            paths.add(project_path(snap.slug))
    if before is None or after is None:
        if any(s.featured for s in snapshots):
            tags.add(PROJECTS_FEATURED_TAG)
    elif before.featured != after.featured or after.featured:
        tags.add(PROJECTS_FEATURED_TAG)
    if after is not None:
        paths.add(project_path(after.slug))
    return RevalidationPlan(frozenset(tags), frozenset(paths))


# ─── Blog ────────────────────────────────────────────────────────

def plan_post_change(
    before: PostSnapshot | None, after: PostSnapshot | None,
) -> RevalidationPlan:
    """Create (before=None), update (both), or delete (after=None)."""
    tags = {BLOG_TAG}
    paths = {BLOG_INDEX_PATH, SITEMAP_PATH}
    snapshots = [s for s in (before, after) if s is not None]
    for snap in snapshots:
        tags.update(blog_category_tag(c) for c in snap.categories)
        if snap.published or before is not None:
            tags.add(BLOG_PUBLISHED_TAG)
        if before is not None:
            tags.add(blog_slug_tag(snap.slug))
        paths.add(blog_post_path(snap.slug))
    return RevalidationPlan(frozenset(tags), frozenset(paths))


def post_page_tags(slug: str, categories: Iterable[str]) -> set[str]:
    """Tags carried by a rendered single-post page."""
    return {BLOG_TAG, BLOG_PUBLISHED_TAG, blog_slug_tag(slug)} | {
        blog_category_tag(c) for c in categories
    }


def project_page_tags(slug: str, category: str) -> set[str]:
    """Tags carried by a rendered single-project page."""
    return {PROJECTS_TAG, project_slug_tag(slug), project_category_tag(category)}
