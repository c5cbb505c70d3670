"""Access Gate — owner privilege, role store, and pause flag.

Invariants:
    - Gate checks run before any domain validation (fast-fail)
    - The owner is a single identity; roles are sets of identities per tag
    - Role changes require DEFAULT_ADMIN on the caller; renouncing only touches the caller
    - pause/unpause are strict toggles: repeating either is a StateError

Design Decisions:
    - Role store and pause flag are collaborator primitives; the engines only decide
      WHEN to consult them (ADR: capability modules composed, not inherited)
"""

from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import Address, EventName, Role
from soulforge.core.errors import AuthorizationError, StateError


# --- Gate checks --------------------------------------------------------------

def require_owner(state: CollectionState, caller: Address) -> None:
    if caller != state.owner:
        raise AuthorizationError("Caller is not the collection owner")


def require_role(state: CollectionState, role: Role, caller: Address) -> None:
    if not has_role(state, role, caller):
        raise AuthorizationError(f"Caller lacks {role.value}")


def require_not_paused(state: CollectionState) -> None:
    if state.paused:
        raise StateError("Collection is paused")


# --- Role store -----------------------------------------------------------------

def has_role(state: CollectionState, role: Role, account: Address) -> bool:
    return account in state.roles.get(role, set())


def grant_role(
    state: CollectionState, caller: Address, role: Role, account: Address,
) -> bool:
    """Grant role to account. Returns False (no event) if already held."""
    require_role(state, Role.DEFAULT_ADMIN, caller)
    members = state.roles.setdefault(role, set())
    if account in members:
        return False
    members.add(account)
    state.emit(EventName.ROLE_GRANTED, role=role.value, account=account, sender=caller)
    return True


def revoke_role(
    state: CollectionState, caller: Address, role: Role, account: Address,
) -> bool:
    """Revoke role from account. Returns False (no event) if not held."""
    require_role(state, Role.DEFAULT_ADMIN, caller)
    return _remove_role(state, caller, role, account)


def renounce_role(state: CollectionState, caller: Address, role: Role) -> bool:
    """Drop one of the caller's own roles."""
    return _remove_role(state, caller, role, caller)


def _remove_role(
    state: CollectionState, caller: Address, role: Role, account: Address,
) -> bool:
    members = state.roles.get(role, set())
    if account not in members:
        return False
    members.discard(account)
    state.emit(EventName.ROLE_REVOKED, role=role.value, account=account, sender=caller)
    return True


# --- Pause flag -----------------------------------------------------------------

def pause(state: CollectionState, caller: Address) -> None:
    require_owner(state, caller)
    if state.paused:
        raise StateError("Collection is already paused")
    state.paused = True
    state.emit(EventName.PAUSED, account=caller)


def unpause(state: CollectionState, caller: Address) -> None:
    require_owner(state, caller)
    if not state.paused:
        raise StateError("Collection is not paused")
    state.paused = False
    state.emit(EventName.UNPAUSED, account=caller)
