"""Phase Controller — holds the sale phase and gates mint entry points on it.

Invariants:
    - set_phase is total: any phase may follow any other, including itself
    - require_phase runs before any other domain validation of an entry point

Design Decisions:
    - No linear ordering inferred (ADR: reverting or skipping phases is observed behavior;
      tightening it would be a behavior change)
"""

from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import EventName, SalePhase
from soulforge.core.errors import PhaseInactiveError


def require_phase(state: CollectionState, required: SalePhase) -> None:
    """Abort with PhaseInactiveError unless the current phase matches."""
    if state.phase != required:
        raise PhaseInactiveError(required.value, state.phase.value)


def set_phase(state: CollectionState, phase: SalePhase) -> None:
    """Overwrite the phase unconditionally. Caller authorization is checked upstream."""
    previous = state.phase
    state.phase = phase
    state.emit(EventName.PHASE_CHANGED, previous=previous.value, current=phase.value)
