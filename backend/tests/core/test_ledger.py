"""Ownership ledger tests — mint, burn, approvals, operator transfers."""

import pytest

from soulforge.core import ledger
from soulforge.core.domain_types import Address, ZERO_ADDRESS
from soulforge.core.errors import (
    AuthorizationError, InvalidInputError, ResourceNotFoundError,
)
from soulforge.core.genesis import initialize_collection

OWNER = Address("0x" + "1" * 40)
ALICE = Address("0x" + "a" * 40)
BOB = Address("0x" + "b" * 40)
CAROL = Address("0x" + "c" * 40)


def _state():
    state = initialize_collection(name="S", symbol="S", owner=OWNER, cap=10)
    ledger.safe_mint(state, ALICE, 1)
    ledger.safe_mint(state, ALICE, 2)
    ledger.safe_mint(state, BOB, 3)
    state.drain_events()
    return state


def test_lookups():
    state = _state()
    assert ledger.owner_of(state, 1) == ALICE
    assert ledger.balance_of(state, ALICE) == 2
    assert ledger.tokens_of(state, ALICE) == [1, 2]
    assert ledger.exists(state, 3)
    assert not ledger.exists(state, 4)


def test_balance_of_zero_address_invalid():
    with pytest.raises(InvalidInputError):
        ledger.balance_of(_state(), ZERO_ADDRESS)


def test_owner_of_missing():
    with pytest.raises(ResourceNotFoundError):
        ledger.owner_of(_state(), 9)


def test_safe_mint_rejects_duplicate_and_zero_address():
    state = _state()
    with pytest.raises(InvalidInputError):
        ledger.safe_mint(state, BOB, 1)
    with pytest.raises(InvalidInputError):
        ledger.safe_mint(state, ZERO_ADDRESS, 4)


def test_burn_missing_raises():
    state = _state()
    ledger.burn(state, 1)
    with pytest.raises(ResourceNotFoundError):
        ledger.burn(state, 1)


def test_transfer_by_owner_emits_event():
    state = _state()
    ledger.transfer_from(state, ALICE, ALICE, BOB, 1)
    assert ledger.owner_of(state, 1) == BOB
    assert state.drain_events() == [{
        "name": "Transfer", "payload": {"from": ALICE, "to": BOB, "token_id": 1},
    }]


def test_transfer_by_stranger_rejected():
    state = _state()
    with pytest.raises(AuthorizationError):
        ledger.transfer_from(state, CAROL, ALICE, BOB, 1)


def test_transfer_wrong_from_rejected():
    state = _state()
    with pytest.raises(AuthorizationError):
        ledger.transfer_from(state, ALICE, BOB, CAROL, 1)


def test_transfer_to_zero_rejected():
    state = _state()
    with pytest.raises(InvalidInputError):
        ledger.transfer_from(state, ALICE, ALICE, ZERO_ADDRESS, 1)


def test_approved_spender_transfers_once():
    state = _state()
    ledger.approve(state, ALICE, CAROL, 1)
    assert ledger.get_approved(state, 1) == CAROL
    ledger.transfer_from(state, CAROL, ALICE, CAROL, 1)
    assert ledger.get_approved(state, 1) is None


def test_approve_current_owner_rejected():
    with pytest.raises(InvalidInputError):
        ledger.approve(_state(), ALICE, ALICE, 1)


def test_approve_by_stranger_rejected():
    with pytest.raises(AuthorizationError):
        ledger.approve(_state(), CAROL, CAROL, 1)


def test_operator_moves_every_unit():
    state = _state()
    ledger.set_approval_for_all(state, ALICE, CAROL, True)
    assert ledger.is_approved_for_all(state, ALICE, CAROL)
    ledger.transfer_from(state, CAROL, ALICE, BOB, 1)
    ledger.transfer_from(state, CAROL, ALICE, BOB, 2)
    assert ledger.tokens_of(state, BOB) == [1, 2, 3]


def test_operator_revoked():
    state = _state()
    ledger.set_approval_for_all(state, ALICE, CAROL, True)
    ledger.set_approval_for_all(state, ALICE, CAROL, False)
    with pytest.raises(AuthorizationError):
        ledger.transfer_from(state, CAROL, ALICE, BOB, 1)


def test_self_operator_rejected():
    with pytest.raises(InvalidInputError):
        ledger.set_approval_for_all(_state(), ALICE, ALICE, True)
