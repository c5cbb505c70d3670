"""Metadata Resolver — descriptor for a unit before and after the one-time reveal.

Invariants:
    - Before reveal: the placeholder for EVERY id, existing or not, override or not
    - After reveal: a non-empty override wins verbatim, else base template + id
    - After reveal a nonexistent id raises ResourceNotFoundError
    - reveal flips revealed False -> True exactly once; a second call is a StateError

Design Decisions:
    - Empty base template resolves to "" rather than just the id, matching the
      ledger's default descriptor behavior
"""

from soulforge.core.access import require_owner
from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import Address, EventName, TokenId
from soulforge.core.errors import StateError
from soulforge.core.ledger import get_unit


def resolve(state: CollectionState, token_id: TokenId) -> str:
    """Resolve the descriptor ("token URI") for token_id."""
    if not state.revealed:
        return state.placeholder_descriptor

    unit = get_unit(state, token_id)
    if unit.descriptor_override:
        return unit.descriptor_override
    return default_descriptor(state, token_id)


def default_descriptor(state: CollectionState, token_id: TokenId) -> str:
    if not state.base_descriptor_template:
        return ""
    return f"{state.base_descriptor_template}{token_id}"


def reveal(state: CollectionState, caller: Address, new_base_template: str) -> None:
    """One-shot switch from the placeholder to per-unit descriptors."""
    require_owner(state, caller)
    if state.revealed:
        raise StateError("Collection has already been revealed")
    state.base_descriptor_template = new_base_template
    state.revealed = True
    state.emit(EventName.REVEALED, base_template=new_base_template)
