"""Access gate tests — role store and the pause flag."""

import pytest

from soulforge.core import access
from soulforge.core.domain_types import Address, Role
from soulforge.core.errors import AuthorizationError, StateError
from soulforge.core.genesis import initialize_collection

OWNER = Address("0x" + "1" * 40)
ALICE = Address("0x" + "a" * 40)
BOB = Address("0x" + "b" * 40)


def _state():
    return initialize_collection(name="S", symbol="S", owner=OWNER, cap=10)


def test_grant_and_revoke():
    state = _state()
    assert access.grant_role(state, OWNER, Role.MINTER, ALICE) is True
    assert access.has_role(state, Role.MINTER, ALICE)
    assert access.revoke_role(state, OWNER, Role.MINTER, ALICE) is True
    assert not access.has_role(state, Role.MINTER, ALICE)


def test_repeat_grant_is_silent_noop():
    state = _state()
    access.grant_role(state, OWNER, Role.MINTER, ALICE)
    state.drain_events()
    assert access.grant_role(state, OWNER, Role.MINTER, ALICE) is False
    assert state.drain_events() == []


def test_revoke_missing_is_noop():
    state = _state()
    assert access.revoke_role(state, OWNER, Role.MINTER, ALICE) is False


def test_role_changes_require_admin():
    state = _state()
    with pytest.raises(AuthorizationError):
        access.grant_role(state, ALICE, Role.MINTER, ALICE)
    with pytest.raises(AuthorizationError):
        access.revoke_role(state, ALICE, Role.MINTER, OWNER)


def test_granted_admin_can_grant():
    state = _state()
    access.grant_role(state, OWNER, Role.DEFAULT_ADMIN, ALICE)
    assert access.grant_role(state, ALICE, Role.MINTER, BOB) is True


def test_renounce_own_role():
    state = _state()
    assert access.renounce_role(state, OWNER, Role.MINTER) is True
    assert not access.has_role(state, Role.MINTER, OWNER)


def test_pause_and_unpause():
    state = _state()
    access.pause(state, OWNER)
    assert state.paused is True
    with pytest.raises(StateError):
        access.require_not_paused(state)
    access.unpause(state, OWNER)
    assert state.paused is False


def test_pause_is_strict_toggle():
    state = _state()
    with pytest.raises(StateError):
        access.unpause(state, OWNER)
    access.pause(state, OWNER)
    with pytest.raises(StateError):
        access.pause(state, OWNER)


def test_pause_owner_only():
    state = _state()
    with pytest.raises(AuthorizationError):
        access.pause(state, ALICE)
