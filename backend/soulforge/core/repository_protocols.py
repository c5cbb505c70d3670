"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions never await — the shell orchestrates around them
"""

from typing import Protocol

from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import Address, Wei


class CollectionRepository(Protocol):
    """Contract for collection persistence — implemented by shell."""
    async def exists(self) -> bool: ...
    async def create(self, state: CollectionState) -> None: ...
    async def load(self, for_update: bool = False) -> CollectionState: ...
    async def save(self, state: CollectionState) -> None: ...
    async def append_events(self, events: list[dict], caller: Address | None) -> None: ...


class PayoutRail(Protocol):
    """Contract for moving value out of the collection — implemented by shell.

    Returns True when the value landed. False or an exception means the
    movement failed and the withdrawal must abort as a whole.
    """
    async def send(self, recipient: Address, amount: Wei) -> bool: ...
