"""Project Actions — public portfolio reads and admin project mutations.

Invariants:
    - featured=True filters to featured projects only; limit caps the count
    - A mutation revalidates the project's tags/paths before AND after the
      write (featured flag and category changes included), only after commit
    - Unknown slugs on update/delete -> NOT_FOUND; duplicate slug -> CONFLICT
"""

import logging
from typing import Any

from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.action_result import ActionResult
from agency.core.cache_tags import ProjectSnapshot, plan_project_change
from agency.core.domain_types import ProjectCategory
from agency.core.errors import NotFoundError
from agency.infrastructure.render_cache import RenderCache
from agency.models.project import Project
from agency.repositories import projects as project_repo
from agency.schemas.project import ProjectCreate, ProjectOut, ProjectUpdate
from agency.services.actions import parse_input, run_action
from agency.services.revalidation import apply_plan

logger = logging.getLogger(__name__)

_CLEARABLE_FIELDS = frozenset({"client", "results"})


class ProjectQuery(BaseModel):
    featured: bool = False
    limit: int | None = Field(None, ge=1, le=100)
    category: ProjectCategory | None = None


def project_out(project: Project) -> dict[str, Any]:
    return ProjectOut.model_validate(project).model_dump(mode="json")


def project_snapshot(project: Project) -> ProjectSnapshot:
    return ProjectSnapshot(
        slug=project.slug,
        category=ProjectCategory(project.category).value,
        featured=bool(project.featured),
    )


# ─── Public reads ────────────────────────────────────────────────

async def get_projects(
    db: AsyncSession,
    featured: bool = False,
    limit: int | None = None,
    category: str | None = None,
) -> ActionResult:
    async def operation():
        query = parse_input(
            ProjectQuery,
            {"featured": featured, "limit": limit, "category": category},
        )
        projects = await project_repo.find_projects(
            db, featured=query.featured, limit=query.limit, category=query.category,
        )
        return [project_out(p) for p in projects]

    return await run_action("get_projects", operation, "Failed to fetch projects")


async def get_featured_projects(db: AsyncSession) -> ActionResult:
    return await get_projects(db, featured=True)


async def get_projects_by_category(db: AsyncSession, category: str) -> ActionResult:
    return await get_projects(db, category=category)


async def get_project(db: AsyncSession, slug: str) -> ActionResult:
    async def operation():
        project = await project_repo.get_project_by_slug(db, slug)
        if project is None:
            raise NotFoundError("Project")
        return project_out(project)

    return await run_action(
        "get_project", operation, "Failed to fetch project", slug=slug,
    )


# ─── Admin ───────────────────────────────────────────────────────

async def list_projects_admin(db: AsyncSession) -> ActionResult:
    async def operation():
        return [project_out(p) for p in await project_repo.get_all_projects(db)]

    return await run_action(
        "list_projects_admin", operation, "Failed to fetch projects",
    )


async def create_project(
    db: AsyncSession, cache: RenderCache, raw: Any,
) -> ActionResult:
    async def operation():
        payload = parse_input(ProjectCreate, raw)
        project = await project_repo.create_project(db, payload.model_dump())
        apply_plan(cache, plan_project_change(None, project_snapshot(project)))
        logger.info(
            f"Project created: {project.slug}", extra={"slug": project.slug},
        )
        return project_out(project)

    return await run_action("create_project", operation, "Failed to create project")


async def update_project(
    db: AsyncSession, cache: RenderCache, slug: str, raw: Any,
) -> ActionResult:
    async def operation():
        payload = parse_input(ProjectUpdate, raw)
        project = await project_repo.get_project_by_slug(db, slug)
        if project is None:
            raise NotFoundError("Project")
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in _CLEARABLE_FIELDS
        }
        before = project_snapshot(project)
        project = await project_repo.update_project(db, project, changes)
        apply_plan(cache, plan_project_change(before, project_snapshot(project)))
        logger.info(
            f"Project updated: {project.slug}", extra={"slug": project.slug},
        )
        return project_out(project)

    return await run_action(
        "update_project", operation, "Failed to update project", slug=slug,
    )


async def delete_project(
    db: AsyncSession, cache: RenderCache, slug: str,
) -> ActionResult:
    async def operation():
        project = await project_repo.get_project_by_slug(db, slug)
        if project is None:
            raise NotFoundError("Project")
        before = project_snapshot(project)
        await project_repo.delete_project(db, project)
        apply_plan(cache, plan_project_change(before, None))
        logger.info(f"Project deleted: {slug}", extra={"slug": slug})
        return {"slug": slug}

    return await run_action(
        "delete_project", operation, "Failed to delete project", slug=slug,
    )
