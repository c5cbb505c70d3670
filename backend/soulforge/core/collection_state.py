"""Collection State — the single owned struct every core operation mutates.

Invariants:
    - issued_count <= cap after every committed operation, and never decreases
    - units holds live units only; a destroyed id is gone but never reissued
    - revealed is monotone: once True, never False
    - presale_claims[address] > 0 means that identity can never presale again
    - events is a transient buffer: flushed by the shell on commit, dropped on abort

Design Decisions:
    - One dataclass threaded explicitly into every operation (ADR: no implicit global)
    - Dict-based unit index keyed by TokenId (ADR: O(1) ledger lookups)
    - cap is set at construction and never reassigned by any operation
"""

from dataclasses import dataclass, field

from soulforge.core.domain_types import (
    Address, Digest, EventName, Role, SalePhase, TokenId, Wei, ZERO_ADDRESS,
)


@dataclass
class Unit:
    """One issued token. Owned by exactly one identity while it exists."""

    id: TokenId
    owner: Address
    locked: bool = False
    descriptor_override: str | None = None

    # Ledger collaborator bookkeeping
    approved: Address | None = None

    # Delegated-usage collaborator bookkeeping
    rental_user: Address | None = None
    rental_expires: int = 0


@dataclass
class CollectionState:
    """Process-wide collection state — pure dataclass, no IO."""

    # === Identity ===
    name: str
    symbol: str
    owner: Address
    cap: int

    # === Supply ===
    issued_count: int = 0

    # === Sale configuration ===
    phase: SalePhase = SalePhase.CLOSED
    public_price: Wei = Wei(0)
    presale_price: Wei = Wei(0)
    allow_list_root: Digest | None = None

    # === Metadata ===
    revealed: bool = False
    placeholder_descriptor: str = ""
    base_descriptor_template: str = ""

    # === Collaborator state (pause, roles, royalty, treasury) ===
    paused: bool = False
    roles: dict[Role, set[Address]] = field(default_factory=dict)
    royalty_receiver: Address = ZERO_ADDRESS
    royalty_bps: int = 0
    balance: Wei = Wei(0)

    # === Per-unit / per-identity records ===
    units: dict[TokenId, Unit] = field(default_factory=dict)
    presale_claims: dict[Address, int] = field(default_factory=dict)
    operator_approvals: dict[Address, set[Address]] = field(default_factory=dict)

    # === Event buffer (transient — flushed by the shell on commit) ===
    events: list[dict] = field(default_factory=list)

    # --- Computed properties ---------------------------------------------------

    @property
    def live_supply(self) -> int:
        """Units currently owned. Distinct from issued_count after any burn."""
        return len(self.units)

    @property
    def remaining_capacity(self) -> int:
        """Ids that can still be issued. Burns never give headroom back."""
        return self.cap - self.issued_count

    # --- Mutation methods --------------------------------------------------------

    def emit(self, name: EventName, **payload: object) -> None:
        """Buffer an event for persistence on commit."""
        self.events.append({"name": name.value, "payload": payload})

    def drain_events(self) -> list[dict]:
        """Return buffered events and clear the buffer."""
        events = self.events
        self.events = []
        return events
