"""Investment endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.fundtrack.api.dependencies import InvestmentServiceDep
from src.fundtrack.schemas.common import MessageResponse
from src.fundtrack.schemas.investment import (
    InvestmentCreate,
    InvestmentRead,
    InvestmentUpdate,
    InvestmentWithDetails,
)

router = APIRouter(tags=["investments"])


@router.get(
    "/investments_with_details",
    response_model=list[InvestmentWithDetails],
    summary="List investments",
    description="Active investments with project title and investor name.",
)
async def list_investments_with_details(
    investment_service: InvestmentServiceDep,
) -> list[InvestmentWithDetails]:
    rows = await investment_service.list_with_details()
    return [InvestmentWithDetails.model_validate(dict(row)) for row in rows]


@router.get(
    "/investments/{investment_id}",
    response_model=InvestmentWithDetails,
    summary="Get investment",
    responses={
        200: {"description": "Investment details"},
        404: {"description": "Investment not found or inactive"},
    },
)
async def get_investment(
    investment_id: int,
    investment_service: InvestmentServiceDep,
) -> InvestmentWithDetails:
    row = await investment_service.get_with_details(investment_id)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Investment not found or inactive.",
        )
    return InvestmentWithDetails.model_validate(dict(row))


@router.post(
    "/investments",
    response_model=InvestmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create investment",
    responses={
        201: {"description": "Investment created"},
        400: {"description": "A required field is missing"},
    },
)
async def create_investment(
    request: InvestmentCreate,
    investment_service: InvestmentServiceDep,
) -> InvestmentRead:
    try:
        investment = await investment_service.create_investment(request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return InvestmentRead.model_validate(investment)


@router.put(
    "/investments/{investment_id}",
    response_model=MessageResponse,
    summary="Update investment",
    description="Partial update: only the fields present in the body are changed.",
    responses={
        200: {"description": "Investment updated"},
        400: {"description": "No updatable field supplied"},
        404: {"description": "Investment not found"},
    },
)
async def update_investment(
    investment_id: int,
    request: InvestmentUpdate,
    investment_service: InvestmentServiceDep,
) -> MessageResponse:
    try:
        updated = await investment_service.update_investment(investment_id, request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Investment not found or no changes made.",
        )
    return MessageResponse(message="Investment updated successfully.")


@router.delete(
    "/investments/{investment_id}",
    response_model=MessageResponse,
    summary="Deactivate investment",
    responses={
        200: {"description": "Investment deactivated"},
        404: {"description": "Investment not found or already inactive"},
    },
)
async def delete_investment(
    investment_id: int,
    investment_service: InvestmentServiceDep,
) -> MessageResponse:
    if not await investment_service.deactivate_investment(investment_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Investment not found or already inactive.",
        )
    return MessageResponse(message="Investment deactivated successfully.")
