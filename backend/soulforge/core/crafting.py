"""Crafting Engine — burn two owned units, mint one carrying a caller-chosen descriptor.

Invariants:
    - id_a != id_b, caller owns both, neither is soul-bound; all checked before any burn
    - Both burns re-check existence through the ledger; a missing unit aborts the call
    - The new unit takes a fresh id from the supply ledger: the two burns give no
      headroom back, so crafting needs one free slot under the cap
    - The new unit resolves to the supplied descriptor verbatim once revealed
    - Locked units are refused here, so no public path destroys a soul-bound unit:
      the owner must unlock it before crafting it away

Design Decisions:
    - Capacity checked up front so a full collection rejects crafting before burning
      (ADR: validate-then-mutate across the whole core)
    - Descriptor content is unrestricted (ADR: caller-supplied, stored as-is)
"""

from soulforge.core.access import require_not_paused
from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import Address, EventName, TokenId
from soulforge.core.errors import AuthorizationError, StateError, TransferError
from soulforge.core.ledger import burn, get_unit
from soulforge.core.mint_engine import mint_internal
from soulforge.core.supply_ledger import check_capacity


def craft_and_upgrade(
    state: CollectionState, caller: Address,
    id_a: TokenId, id_b: TokenId, descriptor: str,
) -> TokenId:
    """Destroy id_a and id_b, mint one new unit to caller. Returns the new id."""
    require_not_paused(state)
    if id_a == id_b:
        raise StateError("Crafting requires two distinct tokens")

    unit_a = get_unit(state, id_a)
    unit_b = get_unit(state, id_b)
    if unit_a.owner != caller or unit_b.owner != caller:
        raise AuthorizationError("Caller must own both tokens to craft")
    if unit_a.locked:
        raise TransferError(id_a)
    if unit_b.locked:
        raise TransferError(id_b)
    check_capacity(state, 1)

    burn(state, id_a)
    burn(state, id_b)
    new_id = mint_internal(state, caller)
    state.units[new_id].descriptor_override = descriptor
    state.emit(
        EventName.CRAFTED, owner=caller, burned=[id_a, id_b],
        token_id=new_id, descriptor=descriptor,
    )
    return new_id
