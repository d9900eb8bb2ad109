from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.use_cases.buyers import create_buyer, list_buyers, set_buyer_active
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.buyers import BuyerActivation, BuyerCreate, BuyerResponse

router = APIRouter(prefix="/buyers", tags=["buyers"])


@router.get("/", response_model=list[BuyerResponse])
async def list_buyers_endpoint(
    active_only: bool = False,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items = await list_buyers.execute(uow, context.farm_id, active_only=active_only)
    return [BuyerResponse.model_validate(item) for item in items]


@router.post("/", response_model=BuyerResponse, status_code=status.HTTP_201_CREATED)
async def create_buyer_endpoint(
    payload: BuyerCreate, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await create_buyer.execute(
        uow, context.farm_id, context.role, create_buyer.CreateBuyerInput(**payload.model_dump())
    )
    return BuyerResponse.model_validate(created)


@router.patch("/{buyer_id}/activation", response_model=BuyerResponse)
async def set_buyer_active_endpoint(
    buyer_id: UUID,
    payload: BuyerActivation,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    buyer = await set_buyer_active.execute(
        uow, context.farm_id, context.role, buyer_id, payload.is_active
    )
    return BuyerResponse.model_validate(buyer)
