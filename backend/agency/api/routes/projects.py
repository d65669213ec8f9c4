"""Projects API — public project listing for client-side widgets.

Invariants:
    - featured=true returns only featured projects; limit defaults to 10
    - 200 {projects, count}; storage failure -> 500 {error: "Failed to fetch projects"}
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.action_result import ActionFailure, ActionSuccess, FailureCode
from agency.core.domain_types import ProjectCategory
from agency.infrastructure.database import get_db
from agency.services import project_actions

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("")
async def list_projects(
    featured: bool = Query(False),
    limit: int = Query(10, ge=1, le=100),
    category: ProjectCategory | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    result = await project_actions.get_projects(
        db, featured=featured, limit=limit,
        category=category.value if category else None,
    )
    match result:
        case ActionSuccess(data=projects):
            return {"projects": projects, "count": len(projects)}
        case ActionFailure(code=FailureCode.VALIDATION_ERROR):
            return JSONResponse(status_code=400, content=result.to_dict())
        case ActionFailure():
            return JSONResponse(
                status_code=500, content={"error": "Failed to fetch projects"},
            )
