"""Admin Routes — owner-only configuration, reveal, roles, and withdrawal.

Invariants:
    - Authorization is decided in core/ (owner or DEFAULT_ADMIN), never here
    - withdraw moves the full balance in one call or nothing at all
"""

from fastapi import APIRouter, Depends

from soulforge.api.dependencies import get_caller, get_collection_service
from soulforge.core.domain_types import Address, Digest, TokenId
from soulforge.schemas.admin import (
    LockUpdate, PhaseUpdate, PresaleRootUpdate, PriceUpdate, RevealRequest,
    RoleChange, WithdrawResponse,
)
from soulforge.services.collection_service import CollectionService

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.put("/phase")
async def set_phase(
    body: PhaseUpdate,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.set_phase(caller, body.phase)
    return {"phase": body.phase.value}


@router.put("/presale-root")
async def set_presale_root(
    body: PresaleRootUpdate,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.set_presale_root(caller, Digest(body.root))
    return {"root": body.root}


@router.put("/prices")
async def set_prices(
    body: PriceUpdate,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.set_prices(caller, body.public_price_wei, body.presale_price_wei)
    state = await service.load()
    return {
        "public_price_wei": str(state.public_price),
        "presale_price_wei": str(state.presale_price),
    }


@router.post("/pause")
async def pause(
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.pause(caller)
    return {"paused": True}


@router.post("/unpause")
async def unpause(
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.unpause(caller)
    return {"paused": False}


@router.put("/tokens/{token_id}/lock")
async def lock_soulbound(
    token_id: int,
    body: LockUpdate,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.lock_soulbound(caller, TokenId(token_id), body.locked)
    return {"token_id": token_id, "locked": body.locked}


@router.post("/reveal")
async def reveal(
    body: RevealRequest,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.reveal(caller, body.base_uri)
    return {"revealed": True, "base_uri": body.base_uri}


@router.post("/withdraw", response_model=WithdrawResponse)
async def withdraw(
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    recipient, amount = await service.withdraw(caller)
    return WithdrawResponse(recipient=recipient, amount_wei=str(amount))


@router.post("/roles/grant")
async def grant_role(
    body: RoleChange,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    changed = await service.grant_role(caller, body.role, Address(body.account))
    return {"role": body.role.value, "account": body.account, "changed": changed}


@router.post("/roles/revoke")
async def revoke_role(
    body: RoleChange,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    changed = await service.revoke_role(caller, body.role, Address(body.account))
    return {"role": body.role.value, "account": body.account, "changed": changed}
