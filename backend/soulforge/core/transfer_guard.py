"""Transfer Guard — rejects soul-bound units before any transfer reaches the ledger.

Invariants:
    - Every transfer variant (plain, safe, safe-with-data) passes through guard_transfer
    - A locked unit raises TransferError and the ledger is never called
    - Mint and burn are not intercepted: locking only stops identity-to-identity moves
"""

from soulforge.core.collection_state import CollectionState, Unit
from soulforge.core.domain_types import Address, TokenId
from soulforge.core.errors import TransferError
from soulforge.core import ledger
from soulforge.core.rental import clear_on_owner_change


def guard_transfer(state: CollectionState, token_id: TokenId) -> None:
    if ledger.get_unit(state, token_id).locked:
        raise TransferError(token_id)


def transfer_from(
    state: CollectionState, caller: Address,
    from_addr: Address, to: Address, token_id: TokenId,
) -> Unit:
    guard_transfer(state, token_id)
    unit = ledger.transfer_from(state, caller, from_addr, to, token_id)
    _after_transfer(state, unit, from_addr, to)
    return unit


def safe_transfer_from(
    state: CollectionState, caller: Address,
    from_addr: Address, to: Address, token_id: TokenId, data: bytes = b"",
) -> Unit:
    guard_transfer(state, token_id)
    unit = ledger.safe_transfer_from(state, caller, from_addr, to, token_id, data)
    _after_transfer(state, unit, from_addr, to)
    return unit


def _after_transfer(
    state: CollectionState, unit: Unit, from_addr: Address, to: Address,
) -> None:
    if from_addr != to:
        clear_on_owner_change(state, unit)
