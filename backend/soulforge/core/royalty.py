"""Royalty Registry — fixed fee and beneficiary, configured once at initialization."""

from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import (
    Address, BASIS_POINTS, MAX_ROYALTY_BPS, TokenId, Wei, ZERO_ADDRESS,
)
from soulforge.core.errors import InvalidInputError


def configure_royalty(state: CollectionState, receiver: Address, bps: int) -> None:
    """Set the default royalty. Only called while building the initial state."""
    if receiver == ZERO_ADDRESS:
        raise InvalidInputError("royalty receiver cannot be the zero address", "receiver")
    if not 0 <= bps <= MAX_ROYALTY_BPS:
        raise InvalidInputError(f"royalty must be 0..{MAX_ROYALTY_BPS} bps", "royalty_bps")
    state.royalty_receiver = receiver
    state.royalty_bps = bps


def royalty_info(
    state: CollectionState, token_id: TokenId, sale_price: int,
) -> tuple[Address, Wei]:
    # Same answer for every id, existing or not: the fee is collection-wide.
    if sale_price < 0:
        raise InvalidInputError("sale_price must be non-negative", "sale_price")
    return state.royalty_receiver, Wei(sale_price * state.royalty_bps // BASIS_POINTS)
