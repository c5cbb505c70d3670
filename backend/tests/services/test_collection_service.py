"""CollectionService — unit of work, rollback, and bootstrap behavior.

Invariants:
    - A rejected call persists nothing: no unit, no counter, no claim, no event
    - A payout rail that raises is surfaced as TreasuryError, balance restored
    - ensure_collection never overwrites an existing collection
"""

import pytest
from sqlalchemy import select

from soulforge.core.domain_types import Address, SalePhase
from soulforge.core.errors import SupplyError, TreasuryError
from soulforge.models.collection_event import CollectionEvent
from soulforge.services.collection_bootstrap import ensure_collection
from soulforge.services.collection_service import CollectionService

OWNER = Address("0x" + "1" * 40)
ALICE = Address("0x" + "a" * 40)


class _ExplodingRail:
    async def send(self, recipient, amount):
        raise RuntimeError("rail offline")


async def test_state_survives_round_trip(test_db, seeded):
    service = CollectionService(test_db)
    await service.batch_airdrop(OWNER, [ALICE, ALICE])
    await service.lock_soulbound(OWNER, 2, True)

    state = await CollectionService(test_db).load()
    assert state.issued_count == 2
    assert state.units[2].locked is True
    assert state.units[1].owner == ALICE


async def test_rejected_call_persists_nothing(test_db, seeded):
    service = CollectionService(test_db)
    with pytest.raises(SupplyError) as exc:
        await service.batch_airdrop(OWNER, [ALICE] * 6)
    assert exc.value.context.operation == "batch_airdrop"
    assert exc.value.context.caller == OWNER

    state = await service.load()
    assert state.issued_count == 0
    assert state.units == {}
    events = (await test_db.execute(select(CollectionEvent))).scalars().all()
    assert events == []


async def test_exploding_rail_becomes_treasury_error(test_db, seeded):
    service = CollectionService(test_db, payout_rail=_ExplodingRail())
    await service.set_phase(OWNER, SalePhase.PUBLIC_SALE)
    await service.public_mint(ALICE, 2, 250)

    with pytest.raises(TreasuryError):
        await service.withdraw(OWNER)
    assert (await service.load()).balance == 250


async def test_burned_units_stay_burned(test_db, seeded):
    service = CollectionService(test_db)
    await service.batch_airdrop(OWNER, [ALICE, ALICE])
    new_id = await service.craft_and_upgrade(ALICE, 1, 2, "ipfs://x.json")

    state = await service.load()
    assert new_id == 3
    assert set(state.units) == {3}
    assert state.units[3].descriptor_override == "ipfs://x.json"


async def test_bootstrap_is_idempotent(test_db, seeded, settings):
    settings.max_supply = 999
    assert await ensure_collection(test_db, settings) is False
    assert (await CollectionService(test_db).load()).cap == 5


async def test_presale_claim_persisted(test_db, seeded):
    from soulforge.core.allow_list import build_allow_list

    service = CollectionService(test_db)
    tree = build_allow_list([ALICE])
    await service.set_presale_root(OWNER, tree.root)
    await service.set_phase(OWNER, SalePhase.PRESALE)
    await service.presale_mint(ALICE, 3, tree.proofs[ALICE], 150)

    state = await service.load()
    assert state.presale_claims == {ALICE: 3}
    assert state.balance == 150
