"""Collection Reads — summary, tokens, accounts, royalty, interfaces, event log.

Invariants:
    - Read-only: no route here changes state
    - token_uri follows the reveal rules: placeholder for ANY id before reveal
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from soulforge.core import ledger, metadata, rental
from soulforge.core.domain_types import Role, TokenId, normalize_address
from soulforge.infrastructure.collection_repository import SqlCollectionRepository
from soulforge.infrastructure.database import get_db
from soulforge.schemas.collection import (
    AccountView, CollectionSummary, EventPage, EventView, InterfaceSupport,
    RoyaltyView, TokenView,
)
from soulforge.services.collection_service import CollectionService
from soulforge.api.dependencies import get_collection_service

router = APIRouter(prefix="/api/v1", tags=["collection"])


@router.get("/collection", response_model=CollectionSummary)
async def get_collection(service: CollectionService = Depends(get_collection_service)):
    """Collection-wide state: cap, counters, phase, prices, switches."""
    state = await service.load()
    return CollectionSummary(
        name=state.name,
        symbol=state.symbol,
        owner=state.owner,
        cap=state.cap,
        issued_count=state.issued_count,
        live_supply=state.live_supply,
        remaining_capacity=state.remaining_capacity,
        phase=state.phase.value,
        public_price_wei=str(state.public_price),
        presale_price_wei=str(state.presale_price),
        allow_list_root=state.allow_list_root,
        revealed=state.revealed,
        paused=state.paused,
        balance_wei=str(state.balance),
    )


@router.get("/collection/events", response_model=EventPage)
async def list_events(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """Committed events in commit order."""
    repository = SqlCollectionRepository(db)
    events = await repository.list_events(limit, offset)
    return EventPage(
        events=[
            EventView(
                id=e.id, name=e.name, payload=e.payload,
                caller=e.caller, created_at=e.created_at,
            )
            for e in events
        ],
        total=await repository.count_events(),
        limit=limit,
        offset=offset,
    )


@router.get("/collection/interfaces/{interface_id}", response_model=InterfaceSupport)
async def get_interface_support(interface_id: str):
    """Capability discovery across all collection modules."""
    return InterfaceSupport(
        interface_id=interface_id.lower(),
        supported=CollectionService.supports_interface(interface_id),
    )


@router.get("/tokens/{token_id}", response_model=TokenView)
async def get_token(
    token_id: int, service: CollectionService = Depends(get_collection_service),
):
    state = await service.load()
    unit = ledger.get_unit(state, TokenId(token_id))
    return TokenView(
        token_id=unit.id,
        owner=unit.owner,
        locked=unit.locked,
        approved=unit.approved,
        token_uri=metadata.resolve(state, unit.id),
        user=rental.user_of(state, unit.id, service.now()),
        user_expires=rental.user_expires(state, unit.id),
    )


@router.get("/tokens/{token_id}/uri")
async def get_token_uri(
    token_id: int, service: CollectionService = Depends(get_collection_service),
):
    """Descriptor for token_id — placeholder for every id until reveal."""
    return {"token_id": token_id, "token_uri": await service.token_uri(TokenId(token_id))}


@router.get("/tokens/{token_id}/royalty", response_model=RoyaltyView)
async def get_royalty(
    token_id: int,
    sale_price: int = Query(ge=0),
    service: CollectionService = Depends(get_collection_service),
):
    receiver, amount = await service.royalty_info(TokenId(token_id), sale_price)
    return RoyaltyView(receiver=receiver, royalty_amount_wei=str(amount))


@router.get("/accounts/{address}", response_model=AccountView)
async def get_account(
    address: str, service: CollectionService = Depends(get_collection_service),
):
    account = normalize_address(address)
    state = await service.load()
    return AccountView(
        address=account,
        balance=ledger.balance_of(state, account),
        token_ids=ledger.tokens_of(state, account),
        presale_claimed=state.presale_claims.get(account, 0),
        roles=sorted(role.value for role in Role if account in state.roles.get(role, set())),
    )
