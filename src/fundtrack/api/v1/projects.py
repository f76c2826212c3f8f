"""Project endpoints.

A project's status is kept as an append-only history; reads join the
project to its latest entry.
"""

from fastapi import APIRouter, HTTPException, status

from src.fundtrack.api.dependencies import ProjectServiceDep
from src.fundtrack.schemas.common import MessageResponse
from src.fundtrack.schemas.project import (
    ProjectCreate,
    ProjectRead,
    ProjectStatusHistoryEntry,
    ProjectStatusSummary,
    ProjectUpdate,
    ProjectWithLatestStatus,
)

router = APIRouter(tags=["projects"])

PROJECT_NOT_FOUND = "Project not found"


@router.get(
    "/projects",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List all active projects.",
)
async def list_projects(project_service: ProjectServiceDep) -> list[ProjectRead]:
    projects = await project_service.list_active()
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/projects_with_status",
    response_model=list[ProjectStatusSummary],
    summary="List projects with status",
    description=(
        "Active projects with their latest status, total active investment and "
        "number of distinct investors, most recently updated first."
    ),
)
async def list_projects_with_status(
    project_service: ProjectServiceDep,
) -> list[ProjectStatusSummary]:
    rows = await project_service.list_with_status()
    return [ProjectStatusSummary.model_validate(dict(row)) for row in rows]


@router.get(
    "/projects/{project_id}",
    response_model=ProjectWithLatestStatus,
    summary="Get project",
    description="Get a project by ID together with its latest status.",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: int,
    project_service: ProjectServiceDep,
) -> ProjectWithLatestStatus:
    row = await project_service.get_with_latest_status(project_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROJECT_NOT_FOUND)
    return ProjectWithLatestStatus.model_validate(dict(row))


@router.get(
    "/projects/{project_id}/status-history",
    response_model=list[ProjectStatusHistoryEntry],
    summary="Get project status history",
    description="Every status recorded for a project, newest first.",
    responses={
        200: {"description": "Status history"},
        404: {"description": "Project not found"},
    },
)
async def get_project_status_history(
    project_id: int,
    project_service: ProjectServiceDep,
) -> list[ProjectStatusHistoryEntry]:
    rows = await project_service.list_status_history(project_id)
    if rows is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROJECT_NOT_FOUND)
    return [ProjectStatusHistoryEntry.model_validate(dict(row)) for row in rows]


@router.post(
    "/projects",
    response_model=ProjectWithLatestStatus,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project; its commencement date becomes the first status entry.",
    responses={
        201: {"description": "Project created"},
        400: {"description": "Title or commencement date missing"},
    },
)
async def create_project(
    request: ProjectCreate,
    project_service: ProjectServiceDep,
) -> ProjectWithLatestStatus:
    try:
        row = await project_service.create_project(request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return ProjectWithLatestStatus.model_validate(dict(row))


@router.put(
    "/projects/{project_id}",
    response_model=ProjectWithLatestStatus,
    summary="Update project",
    description=(
        "Overwrite title and description. Supplying Status_ID and Status_Date "
        "records a new status unless it matches the current one."
    ),
    responses={
        200: {"description": "Project updated"},
        400: {"description": "Title missing"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: int,
    request: ProjectUpdate,
    project_service: ProjectServiceDep,
) -> ProjectWithLatestStatus:
    try:
        row = await project_service.update_project(project_id, request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROJECT_NOT_FOUND)
    return ProjectWithLatestStatus.model_validate(dict(row))


@router.delete(
    "/projects/{project_id}",
    response_model=MessageResponse,
    summary="Deactivate project",
    description="Soft delete: the project is marked inactive and kept in storage.",
    responses={
        200: {"description": "Project deactivated"},
        404: {"description": "Project not found or already deactivated"},
    },
)
async def delete_project(
    project_id: int,
    project_service: ProjectServiceDep,
) -> MessageResponse:
    if not await project_service.deactivate_project(project_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found or already deactivated",
        )
    return MessageResponse(message="Project deactivated successfully")
