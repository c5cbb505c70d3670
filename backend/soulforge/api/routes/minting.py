"""Minting Routes — presale, public sale, and role-gated airdrop.

Invariants:
    - Caller identity from X-Caller-Address; payment from the body's value field
    - Each request is one atomic call: all units minted or none
"""

from fastapi import APIRouter, Depends, status

from soulforge.api.dependencies import get_caller, get_collection_service
from soulforge.core.domain_types import Address
from soulforge.schemas.minting import (
    AirdropRequest, MintResponse, PresaleMintRequest, PublicMintRequest,
)
from soulforge.services.collection_service import CollectionService

router = APIRouter(prefix="/api/v1/mint", tags=["minting"])


@router.post("/presale", response_model=MintResponse, status_code=status.HTTP_201_CREATED)
async def presale_mint(
    body: PresaleMintRequest,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    token_ids = await service.presale_mint(caller, body.amount, body.proof, body.value)
    return await _mint_response(service, token_ids)


@router.post("/public", response_model=MintResponse, status_code=status.HTTP_201_CREATED)
async def public_mint(
    body: PublicMintRequest,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    token_ids = await service.public_mint(caller, body.amount, body.value)
    return await _mint_response(service, token_ids)


@router.post("/airdrop", response_model=MintResponse, status_code=status.HTTP_201_CREATED)
async def batch_airdrop(
    body: AirdropRequest,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    recipients = [Address(r) for r in body.recipients]
    token_ids = await service.batch_airdrop(caller, recipients)
    return await _mint_response(service, token_ids)


async def _mint_response(service: CollectionService, token_ids: list[int]) -> MintResponse:
    state = await service.load()
    return MintResponse(token_ids=token_ids, issued_count=state.issued_count)
