"""Transfer guard tests — soul-bound units never move between identities."""

import pytest

from soulforge.core import ledger
from soulforge.core.domain_types import Address
from soulforge.core.errors import TransferError
from soulforge.core.genesis import initialize_collection
from soulforge.core.mint_engine import mint_internal
from soulforge.core.rental import set_user, user_of
from soulforge.core.transfer_guard import safe_transfer_from, transfer_from

OWNER = Address("0x" + "1" * 40)
ALICE = Address("0x" + "a" * 40)
BOB = Address("0x" + "b" * 40)


def _state():
    state = initialize_collection(name="S", symbol="S", owner=OWNER, cap=10)
    mint_internal(state, ALICE)
    state.drain_events()
    return state


@pytest.mark.parametrize("variant", ["plain", "safe", "safe_with_data"])
def test_locked_unit_rejected_by_every_variant(variant):
    state = _state()
    state.units[1].locked = True
    with pytest.raises(TransferError) as exc:
        if variant == "plain":
            transfer_from(state, ALICE, ALICE, BOB, 1)
        elif variant == "safe":
            safe_transfer_from(state, ALICE, ALICE, BOB, 1)
        else:
            safe_transfer_from(state, ALICE, ALICE, BOB, 1, b"\x01\x02")
    assert exc.value.http_status == 423
    assert exc.value.context.token_id == 1
    assert state.units[1].owner == ALICE
    assert state.drain_events() == []


def test_unlocked_unit_moves():
    state = _state()
    transfer_from(state, ALICE, ALICE, BOB, 1)
    assert state.units[1].owner == BOB


def test_unlock_restores_transferability():
    state = _state()
    state.units[1].locked = True
    state.units[1].locked = False
    safe_transfer_from(state, ALICE, ALICE, BOB, 1, b"hello")
    assert state.units[1].owner == BOB


def test_guard_does_not_intercept_ledger_burn():
    """Only transfers are guarded; crafting refuses locked units on its own."""
    state = _state()
    state.units[1].locked = True
    ledger.burn(state, 1)
    assert 1 not in state.units


def test_transfer_clears_rental_user():
    state = _state()
    set_user(state, ALICE, 1, BOB, 2_000_000_000)
    transfer_from(state, ALICE, ALICE, BOB, 1)
    assert user_of(state, 1, now=0) != BOB
    assert state.units[1].rental_expires == 0


def test_self_transfer_keeps_rental_user():
    state = _state()
    set_user(state, ALICE, 1, BOB, 2_000_000_000)
    transfer_from(state, ALICE, ALICE, ALICE, 1)
    assert user_of(state, 1, now=0) == BOB
