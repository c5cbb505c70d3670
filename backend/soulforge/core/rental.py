"""Delegated-Usage Registry — who may use a unit, and until when.

Invariants:
    - Only the unit owner or an approved spender may set a user
    - user_of returns the zero address once expires < now
    - expires fits the signed 64-bit column: 0 <= expires <= MAX_TIMESTAMP
    - A user record never survives an ownership change or destruction

Design Decisions:
    - Bookkeeping only; nothing in the core reads the user (ADR: collaborator module)
    - `now` passed in explicitly: core stays clock-free
"""

from soulforge.core.collection_state import CollectionState, Unit
from soulforge.core.domain_types import (
    Address, EventName, MAX_TIMESTAMP, TokenId, ZERO_ADDRESS,
)
from soulforge.core.errors import AuthorizationError, InvalidInputError
from soulforge.core.ledger import get_unit, is_approved_or_owner


def set_user(
    state: CollectionState, caller: Address,
    token_id: TokenId, user: Address, expires: int,
) -> None:
    unit = get_unit(state, token_id)
    if not is_approved_or_owner(state, caller, unit):
        raise AuthorizationError("Caller is not token owner or approved")
    if expires < 0:
        raise InvalidInputError("expires must be a non-negative timestamp", "expires")
    if expires > MAX_TIMESTAMP:
        raise InvalidInputError(f"expires must be at most {MAX_TIMESTAMP}", "expires")
    unit.rental_user = None if user == ZERO_ADDRESS else user
    unit.rental_expires = expires
    state.emit(EventName.UPDATE_USER, token_id=token_id, user=user, expires=expires)


def user_of(state: CollectionState, token_id: TokenId, now: int) -> Address:
    unit = get_unit(state, token_id)
    if unit.rental_user is not None and unit.rental_expires >= now:
        return unit.rental_user
    return ZERO_ADDRESS


def user_expires(state: CollectionState, token_id: TokenId) -> int:
    return get_unit(state, token_id).rental_expires


def clear_on_owner_change(state: CollectionState, unit: Unit) -> None:
    """Drop the user record after a transfer to a different owner."""
    if unit.rental_user is None and unit.rental_expires == 0:
        return
    unit.rental_user = None
    unit.rental_expires = 0
    state.emit(EventName.UPDATE_USER, token_id=unit.id, user=ZERO_ADDRESS, expires=0)
