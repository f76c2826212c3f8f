"""Status endpoints: the status catalogue and the status update log."""

from fastapi import APIRouter, HTTPException, status

from src.fundtrack.api.dependencies import StatusServiceDep
from src.fundtrack.schemas.common import MessageResponse
from src.fundtrack.schemas.status import (
    StatusDefinitionRead,
    StatusUpdateChange,
    StatusUpdateCreate,
    StatusUpdateRead,
)

router = APIRouter(tags=["statuses"])


@router.get(
    "/defStatus",
    response_model=list[StatusDefinitionRead],
    summary="List status definitions",
    description="Active project stages with their completion percentage.",
)
async def list_status_definitions(
    status_service: StatusServiceDep,
) -> list[StatusDefinitionRead]:
    definitions = await status_service.list_definitions()
    return [StatusDefinitionRead.model_validate(d) for d in definitions]


@router.get(
    "/statuses",
    response_model=list[StatusUpdateRead],
    summary="List status updates",
)
async def list_status_updates(status_service: StatusServiceDep) -> list[StatusUpdateRead]:
    updates = await status_service.list_updates()
    return [StatusUpdateRead.model_validate(u) for u in updates]


@router.get(
    "/statuses/{project_id}",
    response_model=list[StatusUpdateRead],
    summary="List status updates for a project",
    description="Updates for one project, newest first.",
    responses={
        200: {"description": "Status updates"},
        404: {"description": "No status updates for this project"},
    },
)
async def list_project_status_updates(
    project_id: int,
    status_service: StatusServiceDep,
) -> list[StatusUpdateRead]:
    updates = await status_service.list_project_updates(project_id)
    if not updates:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No statuses found for this project",
        )
    return [StatusUpdateRead.model_validate(u) for u in updates]


@router.post(
    "/statuses",
    response_model=StatusUpdateRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create status update",
)
async def create_status_update(
    request: StatusUpdateCreate,
    status_service: StatusServiceDep,
) -> StatusUpdateRead:
    entry = await status_service.create_update(request)
    return StatusUpdateRead.model_validate(entry)


@router.put(
    "/statuses/{status_id}",
    response_model=MessageResponse,
    summary="Rewrite status update",
    description="Replace the text of a status update and reset its timestamp.",
    responses={
        200: {"description": "Status updated"},
        404: {"description": "Status not found"},
    },
)
async def update_status_update(
    status_id: int,
    request: StatusUpdateChange,
    status_service: StatusServiceDep,
) -> MessageResponse:
    if not await status_service.rewrite_update(status_id, request.status):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Status not found")
    return MessageResponse(message="Status updated successfully")


@router.delete(
    "/statuses/{status_id}",
    response_model=MessageResponse,
    summary="Delete status update",
    description="Permanently removes the status update.",
    responses={
        200: {"description": "Status deleted"},
        404: {"description": "Status not found"},
    },
)
async def delete_status_update(
    status_id: int,
    status_service: StatusServiceDep,
) -> MessageResponse:
    if not await status_service.delete_update(status_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Status not found")
    return MessageResponse(message="Status deleted successfully")
