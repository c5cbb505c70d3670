"""Transfer Routes — guarded transfers, approvals, operators, delegated users.

Invariants:
    - Both transfer variants go through TransferGuard (soul-bound units refused)
"""

from fastapi import APIRouter, Depends

from soulforge.api.dependencies import get_caller, get_collection_service
from soulforge.core.domain_types import Address, TokenId
from soulforge.schemas.transfers import (
    ApprovalRequest, OperatorRequest, SetUserRequest, TransferRequest,
)
from soulforge.services.collection_service import CollectionService

router = APIRouter(prefix="/api/v1", tags=["transfers"])


@router.post("/transfers")
async def transfer(
    body: TransferRequest,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.transfer(
        caller, Address(body.from_address), Address(body.to_address),
        TokenId(body.token_id), safe=body.safe, data=body.data_bytes(),
    )
    return {"token_id": body.token_id, "owner": body.to_address}


@router.post("/approvals")
async def approve(
    body: ApprovalRequest,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.approve(caller, Address(body.to_address), TokenId(body.token_id))
    return {"token_id": body.token_id, "approved": body.to_address}


@router.post("/operators")
async def set_operator(
    body: OperatorRequest,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.set_approval_for_all(caller, Address(body.operator), body.approved)
    return {"owner": caller, "operator": body.operator, "approved": body.approved}


@router.post("/tokens/{token_id}/user")
async def set_user(
    token_id: int,
    body: SetUserRequest,
    caller: Address = Depends(get_caller),
    service: CollectionService = Depends(get_collection_service),
):
    await service.set_user(caller, TokenId(token_id), Address(body.user), body.expires)
    return {"token_id": token_id, "user": body.user, "expires": body.expires}
