"""Investor endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.fundtrack.api.dependencies import InvestorServiceDep
from src.fundtrack.schemas.common import MessageResponse
from src.fundtrack.schemas.investor import InvestorRead, InvestorWithDetails, InvestorWrite

router = APIRouter(tags=["investors"])


@router.get(
    "/investors",
    response_model=list[InvestorRead],
    summary="List investors",
    description="List all active investors.",
)
async def list_investors(investor_service: InvestorServiceDep) -> list[InvestorRead]:
    investors = await investor_service.list_active()
    return [InvestorRead.model_validate(i) for i in investors]


@router.get(
    "/investors_with_details",
    response_model=list[InvestorWithDetails],
    summary="List investors with portfolio rollups",
    description=(
        "Active investors with project counts and invested amounts, split into "
        "totals and the share in projects that are still in progress."
    ),
)
async def list_investors_with_details(
    investor_service: InvestorServiceDep,
) -> list[InvestorWithDetails]:
    rows = await investor_service.list_with_details()
    return [InvestorWithDetails.model_validate(dict(row)) for row in rows]


@router.get(
    "/investors/{investor_id}",
    response_model=InvestorRead,
    summary="Get investor",
    responses={
        200: {"description": "Investor details"},
        404: {"description": "Investor not found"},
    },
)
async def get_investor(
    investor_id: int,
    investor_service: InvestorServiceDep,
) -> InvestorRead:
    investor = await investor_service.get_active(investor_id)
    if investor is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Investor not found")
    return InvestorRead.model_validate(investor)


@router.post(
    "/investors",
    response_model=InvestorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create investor",
)
async def create_investor(
    request: InvestorWrite,
    investor_service: InvestorServiceDep,
) -> InvestorRead:
    investor = await investor_service.create_investor(request)
    return InvestorRead.model_validate(investor)


@router.put(
    "/investors/{investor_id}",
    response_model=MessageResponse,
    summary="Update investor",
    description="Overwrite name, contact number, address and alias.",
    responses={
        200: {"description": "Investor updated"},
        404: {"description": "Investor not found"},
    },
)
async def update_investor(
    investor_id: int,
    request: InvestorWrite,
    investor_service: InvestorServiceDep,
) -> MessageResponse:
    if not await investor_service.update_investor(investor_id, request):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Investor not found")
    return MessageResponse(message="Investor updated successfully")


@router.delete(
    "/investors/{investor_id}",
    response_model=MessageResponse,
    summary="Deactivate investor",
    responses={
        200: {"description": "Investor deactivated"},
        404: {"description": "Investor not found or already deactivated"},
    },
)
async def delete_investor(
    investor_id: int,
    investor_service: InvestorServiceDep,
) -> MessageResponse:
    if not await investor_service.deactivate_investor(investor_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Investor not found or already deactivated",
        )
    return MessageResponse(message="Investor deactivated successfully")
