"""Project Repository — portfolio queries and admin CRUD for projects.

Invariants:
    - Every list is ordered by created_at desc
    - find_projects(featured=True) returns only featured projects
    - Slug uniqueness violations surface as ConflictError
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.domain_types import ProjectCategory
from agency.models.project import Project
from agency.repositories.base import commit_or_conflict

CONFLICT_MESSAGE = "A project with this slug already exists"


async def find_projects(
    db: AsyncSession,
    featured: bool = False,
    limit: int | None = None,
    category: ProjectCategory | str | None = None,
) -> list[Project]:
    query = select(Project).order_by(Project.created_at.desc())
    if featured:
        query = query.where(Project.featured.is_(True))
    if category:
        query = query.where(Project.category == ProjectCategory(category))
    if limit is not None:
        query = query.limit(limit)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_all_projects(db: AsyncSession) -> list[Project]:
    return await find_projects(db)


async def get_featured_projects(db: AsyncSession) -> list[Project]:
    return await find_projects(db, featured=True)


async def get_projects_by_category(
    db: AsyncSession, category: ProjectCategory | str,
) -> list[Project]:
    return await find_projects(db, category=category)


async def get_project_by_slug(db: AsyncSession, slug: str) -> Project | None:
    result = await db.execute(select(Project).where(Project.slug == slug))
    return result.scalar_one_or_none()


async def create_project(db: AsyncSession, data: dict[str, Any]) -> Project:
    project = Project(**data)
    db.add(project)
    await commit_or_conflict(db, CONFLICT_MESSAGE)
    await db.refresh(project)
    return project


async def update_project(
    db: AsyncSession, project: Project, changes: dict[str, Any],
) -> Project:
    for key, value in changes.items():
        setattr(project, key, value)
    await commit_or_conflict(db, CONFLICT_MESSAGE)
    await db.refresh(project)
    return project


async def delete_project(db: AsyncSession, project: Project) -> None:
    await db.delete(project)
    await db.commit()
