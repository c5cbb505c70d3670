"""Admin Config / Treasury — owner-only setters and the withdrawal bookkeeping.

Invariants:
    - Every function here checks owner privilege first
    - Setters overwrite unconditionally; prices may be set to any non-negative value
    - lock_soulbound works in both directions at any time on any live unit
    - begin_withdrawal zeroes the balance BEFORE the shell moves value; the shell
      aborts the whole call (restoring the balance) if the movement fails

Design Decisions:
    - Withdrawal split into pure bookkeeping (here) + value movement (shell PayoutRail)
      (ADR: state finalized before the external call, no reentrancy window)
"""

from soulforge.core.access import require_owner
from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import (
    Address, Digest, EventName, SalePhase, TokenId, Wei,
)
from soulforge.core.errors import InvalidInputError
from soulforge.core.ledger import get_unit
from soulforge.core import phases


def set_phase(state: CollectionState, caller: Address, phase: SalePhase) -> None:
    require_owner(state, caller)
    phases.set_phase(state, phase)


def set_presale_root(state: CollectionState, caller: Address, root: Digest) -> None:
    require_owner(state, caller)
    state.allow_list_root = root
    state.emit(EventName.PRESALE_ROOT_CHANGED, root=root)


def set_mint_price(state: CollectionState, caller: Address, price: int) -> None:
    require_owner(state, caller)
    state.public_price = _price(price)
    state.emit(EventName.PRICE_CHANGED, kind="public", price=price)


def set_presale_price(state: CollectionState, caller: Address, price: int) -> None:
    require_owner(state, caller)
    state.presale_price = _price(price)
    state.emit(EventName.PRICE_CHANGED, kind="presale", price=price)


def lock_soulbound(
    state: CollectionState, caller: Address, token_id: TokenId, locked: bool,
) -> None:
    require_owner(state, caller)
    get_unit(state, token_id).locked = locked
    state.emit(EventName.SOULBOUND_SET, token_id=token_id, locked=locked)


def begin_withdrawal(state: CollectionState, caller: Address) -> tuple[Address, Wei]:
    """Finalize bookkeeping for a full withdrawal. Returns (recipient, amount)."""
    require_owner(state, caller)
    amount = state.balance
    state.balance = Wei(0)
    state.emit(EventName.WITHDRAWN, recipient=state.owner, amount=amount)
    return state.owner, amount


def _price(price: int) -> Wei:
    if price < 0:
        raise InvalidInputError("price must be non-negative", "price")
    return Wei(price)
