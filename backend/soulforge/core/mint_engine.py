"""Mint Engine — the three issuance paths: presale, public, role-gated airdrop.

Invariants:
    - Order per call: pause/role gate -> phase -> domain validation -> mutation
    - All capacity for a call is checked before the first unit is minted
    - Every unit is minted through mint_internal, which takes exactly one id
      from the supply ledger
    - A presale claim is recorded only on full success; any recorded claim
      permanently closes the presale path for that identity
    - Attached value is kept whole: overpayment is accepted and not refunded

Design Decisions:
    - Proof authenticates membership only; the requested amount is unbounded by it
      (ADR: leaf encodes identity alone — amount-binding needs a new commitment scheme)
    - Airdrop skips phase and payment entirely; its only gate is MINTER_ROLE
"""

from soulforge.core.access import require_not_paused, require_role
from soulforge.core.allow_list import verify_membership
from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import (
    Address, EventName, Role, SalePhase, TokenId, Wei, ZERO_ADDRESS,
)
from soulforge.core.errors import AllowListError, InvalidInputError, PaymentError
from soulforge.core.ledger import safe_mint
from soulforge.core.phases import require_phase
from soulforge.core.supply_ledger import check_capacity, reserve


def presale_mint(
    state: CollectionState, caller: Address,
    amount: int, proof: list[str], value: int,
) -> list[TokenId]:
    """Allow-listed mint. One successful call per identity, ever."""
    require_not_paused(state)
    require_phase(state, SalePhase.PRESALE)
    if not verify_membership(state.allow_list_root, caller, proof):
        raise AllowListError("Invalid allow-list proof")
    if state.presale_claims.get(caller, 0) != 0:
        raise AllowListError("Presale allocation already claimed")
    _require_positive(amount)
    _require_payment(state.presale_price, amount, value)
    check_capacity(state, amount)

    state.presale_claims[caller] = amount
    state.emit(EventName.PRESALE_CLAIMED, account=caller, amount=amount)
    return _mint_batch(state, [caller] * amount, value)


def public_mint(
    state: CollectionState, caller: Address, amount: int, value: int,
) -> list[TokenId]:
    """Open mint during PublicSale. No per-identity cap."""
    require_not_paused(state)
    require_phase(state, SalePhase.PUBLIC_SALE)
    _require_positive(amount)
    _require_payment(state.public_price, amount, value)
    check_capacity(state, amount)
    return _mint_batch(state, [caller] * amount, value)


def batch_airdrop(
    state: CollectionState, caller: Address, recipients: list[Address],
) -> list[TokenId]:
    """One unit per recipient, ids assigned in array order. No phase, no payment."""
    require_role(state, Role.MINTER, caller)
    for index, recipient in enumerate(recipients):
        if recipient == ZERO_ADDRESS:
            raise InvalidInputError(
                f"recipient {index} is the zero address", f"recipients[{index}]",
            )
    check_capacity(state, len(recipients))
    return _mint_batch(state, recipients, 0)


def mint_internal(state: CollectionState, to: Address) -> TokenId:
    """Take one id from the supply ledger and mint it, unlocked, to `to`."""
    (token_id,) = reserve(state, 1)
    safe_mint(state, to, token_id)
    return token_id


# --- Helpers ------------------------------------------------------------------

def _mint_batch(
    state: CollectionState, recipients: list[Address], value: int,
) -> list[TokenId]:
    state.balance = Wei(state.balance + value)
    return [mint_internal(state, to) for to in recipients]


def _require_positive(amount: int) -> None:
    if amount <= 0:
        raise InvalidInputError("amount must be greater than zero", "amount")


def _require_payment(unit_price: int, amount: int, value: int) -> None:
    if value < 0:
        raise InvalidInputError("value must be non-negative", "value")
    required = unit_price * amount
    if value < required:
        raise PaymentError(required, value)
