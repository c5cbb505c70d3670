"""Genesis — builds the initial CollectionState at deployment.

Invariants:
    - The owner holds DEFAULT_ADMIN and MINTER at genesis
    - cap must be positive; it is never changed afterwards
    - Royalty is configured here and nowhere else
"""

from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import Address, Role, SalePhase, Wei
from soulforge.core.errors import InvalidInputError
from soulforge.core.royalty import configure_royalty


def initialize_collection(
    *,
    name: str,
    symbol: str,
    owner: Address,
    cap: int,
    public_price: int = 0,
    presale_price: int = 0,
    placeholder_descriptor: str = "",
    royalty_receiver: Address | None = None,
    royalty_bps: int = 0,
) -> CollectionState:
    if cap <= 0:
        raise InvalidInputError("cap must be greater than zero", "cap")
    if public_price < 0 or presale_price < 0:
        raise InvalidInputError("prices must be non-negative", "price")
    state = CollectionState(
        name=name,
        symbol=symbol,
        owner=owner,
        cap=cap,
        phase=SalePhase.CLOSED,
        public_price=Wei(public_price),
        presale_price=Wei(presale_price),
        placeholder_descriptor=placeholder_descriptor,
        roles={Role.DEFAULT_ADMIN: {owner}, Role.MINTER: {owner}},
    )
    configure_royalty(state, royalty_receiver or owner, royalty_bps)
    return state
