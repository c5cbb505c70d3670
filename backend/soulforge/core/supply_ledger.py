"""Supply Ledger — the single authority for token id allocation.

Invariants:
    - Ids are allocated sequentially from issued_count + 1 and never reused
    - issued_count only grows; destruction never decrements it (cumulative, not circulating)
    - reserve() either allocates all n ids or raises SupplyError with nothing advanced

Design Decisions:
    - Cumulative cap kept as-is: a burn does not free headroom for a later mint
      (ADR: load-bearing observed behavior, not reinterpreted as live supply)
"""

from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import TokenId
from soulforge.core.errors import InvalidInputError, SupplyError


def check_capacity(state: CollectionState, n: int) -> None:
    """Raise SupplyError if n more ids would exceed the cap."""
    if n < 0:
        raise InvalidInputError("requested count must be non-negative", "amount")
    if state.issued_count + n > state.cap:
        raise SupplyError(n, state.issued_count, state.cap)


def reserve(state: CollectionState, n: int) -> list[TokenId]:
    """Allocate n sequential ids and advance issued_count by n."""
    check_capacity(state, n)
    first = state.issued_count + 1
    ids = [TokenId(i) for i in range(first, first + n)]
    state.issued_count += n
    return ids
