"""Ownership Ledger — base collaborator: who owns which unit, approvals, mint/burn.

Invariants:
    - Exactly one owner per live unit; the zero address never owns anything
    - safe_mint refuses an id that already exists
    - burn re-checks existence: a missing id raises ResourceNotFoundError
    - A transfer clears the unit's single-token approval
    - Nothing here knows about locks; TransferGuard sits in front of transfers

Design Decisions:
    - Pure functions over CollectionState.units (ADR: functional core, no ledger object)
    - "safe" variants are identical to plain ones: there are no receiver contracts
      in this model to acknowledge a transfer
"""

from soulforge.core.collection_state import CollectionState, Unit
from soulforge.core.domain_types import Address, EventName, TokenId, ZERO_ADDRESS
from soulforge.core.errors import (
    AuthorizationError, InvalidInputError, ResourceNotFoundError,
)


# --- Lookups ------------------------------------------------------------------

def get_unit(state: CollectionState, token_id: TokenId) -> Unit:
    unit = state.units.get(token_id)
    if unit is None:
        raise ResourceNotFoundError("Token", str(token_id))
    return unit


def exists(state: CollectionState, token_id: TokenId) -> bool:
    return token_id in state.units


def owner_of(state: CollectionState, token_id: TokenId) -> Address:
    return get_unit(state, token_id).owner


def balance_of(state: CollectionState, owner: Address) -> int:
    if owner == ZERO_ADDRESS:
        raise InvalidInputError("zero address is not a valid owner", "owner")
    return sum(1 for unit in state.units.values() if unit.owner == owner)


def tokens_of(state: CollectionState, owner: Address) -> list[TokenId]:
    return sorted(tid for tid, unit in state.units.items() if unit.owner == owner)


def get_approved(state: CollectionState, token_id: TokenId) -> Address | None:
    return get_unit(state, token_id).approved


def is_approved_for_all(
    state: CollectionState, owner: Address, operator: Address,
) -> bool:
    return operator in state.operator_approvals.get(owner, set())


def is_approved_or_owner(state: CollectionState, spender: Address, unit: Unit) -> bool:
    return (
        spender == unit.owner
        or spender == unit.approved
        or is_approved_for_all(state, unit.owner, spender)
    )


# --- Mint / burn ----------------------------------------------------------------

def safe_mint(state: CollectionState, to: Address, token_id: TokenId) -> Unit:
    """Create a unit owned by `to`. Unlocked, no descriptor override."""
    if to == ZERO_ADDRESS:
        raise InvalidInputError("cannot mint to the zero address", "to")
    if token_id in state.units:
        raise InvalidInputError(f"token {token_id} already exists", "token_id")
    unit = Unit(id=token_id, owner=to)
    state.units[token_id] = unit
    state.emit(EventName.TRANSFER, **{"from": ZERO_ADDRESS, "to": to, "token_id": token_id})
    return unit


def burn(state: CollectionState, token_id: TokenId) -> None:
    """Destroy a unit. Does not touch issued_count."""
    unit = get_unit(state, token_id)
    del state.units[token_id]
    state.emit(
        EventName.TRANSFER, **{"from": unit.owner, "to": ZERO_ADDRESS, "token_id": token_id},
    )


# --- Approvals ------------------------------------------------------------------

def approve(
    state: CollectionState, caller: Address, to: Address, token_id: TokenId,
) -> None:
    unit = get_unit(state, token_id)
    if to == unit.owner:
        raise InvalidInputError("approval to current owner", "to")
    if caller != unit.owner and not is_approved_for_all(state, unit.owner, caller):
        raise AuthorizationError("Caller is not token owner or approved for all")
    unit.approved = None if to == ZERO_ADDRESS else to
    state.emit(EventName.APPROVAL, owner=unit.owner, approved=to, token_id=token_id)


def set_approval_for_all(
    state: CollectionState, caller: Address, operator: Address, approved: bool,
) -> None:
    if operator == caller:
        raise InvalidInputError("cannot approve self as operator", "operator")
    if operator == ZERO_ADDRESS:
        raise InvalidInputError("zero address cannot be an operator", "operator")
    operators = state.operator_approvals.setdefault(caller, set())
    if approved:
        operators.add(operator)
    else:
        operators.discard(operator)
    state.emit(
        EventName.APPROVAL_FOR_ALL, owner=caller, operator=operator, approved=approved,
    )


# --- Transfers ------------------------------------------------------------------

def transfer_from(
    state: CollectionState, caller: Address,
    from_addr: Address, to: Address, token_id: TokenId,
) -> Unit:
    """Move a unit between identities. Lock checks are TransferGuard's job."""
    unit = get_unit(state, token_id)
    if to == ZERO_ADDRESS:
        raise InvalidInputError("cannot transfer to the zero address", "to")
    if unit.owner != from_addr:
        raise AuthorizationError(f"Token {token_id} is not owned by {from_addr}")
    if not is_approved_or_owner(state, caller, unit):
        raise AuthorizationError("Caller is not token owner or approved")
    unit.owner = to
    unit.approved = None
    state.emit(EventName.TRANSFER, **{"from": from_addr, "to": to, "token_id": token_id})
    return unit


def safe_transfer_from(
    state: CollectionState, caller: Address,
    from_addr: Address, to: Address, token_id: TokenId, data: bytes = b"",
) -> Unit:
    return transfer_from(state, caller, from_addr, to, token_id)
