"""Admin tests — owner-only setters, soul-bound locks, withdrawal bookkeeping."""

import pytest

from soulforge.core import admin
from soulforge.core.domain_types import Address, SalePhase
from soulforge.core.errors import (
    AuthorizationError, InvalidInputError, ResourceNotFoundError,
)
from soulforge.core.genesis import initialize_collection
from soulforge.core.mint_engine import mint_internal

OWNER = Address("0x" + "1" * 40)
ALICE = Address("0x" + "a" * 40)
ROOT = "0x" + "ab" * 32


def _state():
    state = initialize_collection(name="S", symbol="S", owner=OWNER, cap=10)
    mint_internal(state, ALICE)
    state.drain_events()
    return state


@pytest.mark.parametrize("call", [
    lambda s, c: admin.set_phase(s, c, SalePhase.PRESALE),
    lambda s, c: admin.set_presale_root(s, c, ROOT),
    lambda s, c: admin.set_mint_price(s, c, 1),
    lambda s, c: admin.set_presale_price(s, c, 1),
    lambda s, c: admin.lock_soulbound(s, c, 1, True),
    lambda s, c: admin.begin_withdrawal(s, c),
])
def test_non_owner_rejected(call):
    state = _state()
    state.balance = 10
    with pytest.raises(AuthorizationError):
        call(state, ALICE)
    assert state.phase == SalePhase.CLOSED
    assert state.units[1].locked is False
    assert state.balance == 10
    assert state.drain_events() == []


def test_any_phase_may_follow_any_other():
    state = _state()
    for phase in [
        SalePhase.PUBLIC_SALE, SalePhase.PRESALE, SalePhase.CLOSED,
        SalePhase.CLOSED, SalePhase.PUBLIC_SALE,
    ]:
        admin.set_phase(state, OWNER, phase)
        assert state.phase == phase


def test_phase_change_event():
    state = _state()
    admin.set_phase(state, OWNER, SalePhase.PRESALE)
    assert state.drain_events() == [{
        "name": "PhaseChanged",
        "payload": {"previous": "closed", "current": "presale"},
    }]


def test_prices_overwrite():
    state = _state()
    admin.set_mint_price(state, OWNER, 0)
    admin.set_presale_price(state, OWNER, 10**30)
    assert state.public_price == 0
    assert state.presale_price == 10**30


def test_negative_price_rejected():
    state = _state()
    with pytest.raises(InvalidInputError):
        admin.set_mint_price(state, OWNER, -1)


def test_presale_root_replaced():
    state = _state()
    admin.set_presale_root(state, OWNER, ROOT)
    admin.set_presale_root(state, OWNER, "0x" + "cd" * 32)
    assert state.allow_list_root == "0x" + "cd" * 32


def test_lock_both_directions():
    state = _state()
    admin.lock_soulbound(state, OWNER, 1, True)
    assert state.units[1].locked is True
    admin.lock_soulbound(state, OWNER, 1, False)
    assert state.units[1].locked is False


def test_lock_missing_unit():
    state = _state()
    with pytest.raises(ResourceNotFoundError):
        admin.lock_soulbound(state, OWNER, 42, True)


def test_withdrawal_zeroes_balance_and_names_owner():
    state = _state()
    state.balance = 12345
    recipient, amount = admin.begin_withdrawal(state, OWNER)
    assert (recipient, amount) == (OWNER, 12345)
    assert state.balance == 0
    assert state.drain_events()[-1]["name"] == "Withdrawn"


def test_withdrawal_of_empty_balance():
    state = _state()
    assert admin.begin_withdrawal(state, OWNER) == (OWNER, 0)
