"""Crafting Route — burn two owned units into one with a chosen descriptor."""

from fastapi import APIRouter, Depends, status

from soulforge.api.dependencies import get_caller, get_collection_service
from soulforge.core.domain_types import Address, TokenId
from soulforge.schemas.crafting import CraftRequest, CraftResponse
from soulforge.services.collection_service import CollectionService

router = APIRouter(prefix="/api/v1/craft", tags=["crafting"])


@router.post("", response_model=CraftResponse, status_code=status.HTTP_201_CREATED)
async def craft_and_upgrade(
    body: CraftRequest,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    new_id = await service.craft_and_upgrade(
        caller, TokenId(body.token_a), TokenId(body.token_b), body.descriptor,
    )
    return CraftResponse(
        token_id=new_id, burned=[body.token_a, body.token_b], descriptor=body.descriptor,
    )
