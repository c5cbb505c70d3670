"""Collection Service — runs every entry point as one atomic unit of work.

Invariants:
    - Each write: lock -> load state (row-locked) -> ONE core operation -> save -> commit
    - Any SoulforgeError rolls the transaction back: no partial mint, burn, claim,
      payout, or event survives an aborted call
    - Writes are serialized process-wide by _write_lock and across processes by the
      row lock on the collection singleton
    - Withdrawal: balance zeroed and saved BEFORE the payout rail moves value; a
      failed movement raises TreasuryError and rolls everything back

Design Decisions:
    - Impureim sandwich: IO here, every rule in core/ (ADR: functional core)
    - Fresh state per call instead of a cached one: a rolled-back call leaves no
      stale in-memory copy behind
    - Reads take no lock: they see the last committed state
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from soulforge.core import (
    access, admin, crafting, ledger, metadata, mint_engine, rental, royalty,
    transfer_guard,
)
from soulforge.core.collection_state import CollectionState
from soulforge.core.domain_types import Address, Digest, Role, SalePhase, TokenId, Wei
from soulforge.core.errors import SoulforgeError, TreasuryError
from soulforge.core.interfaces import supports_interface
from soulforge.core.repository_protocols import CollectionRepository, PayoutRail
from soulforge.infrastructure.collection_repository import SqlCollectionRepository
from soulforge.infrastructure.payout_rail import DatabasePayoutRail

logger = logging.getLogger(__name__)

T = TypeVar("T")

_write_lock = asyncio.Lock()


class CollectionService:
    """Entry points of the collection. One method per operation."""

    def __init__(
        self,
        db: AsyncSession,
        repository: CollectionRepository | None = None,
        payout_rail: PayoutRail | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.db = db
        self.repository = repository or SqlCollectionRepository(db)
        self.payout_rail = payout_rail or DatabasePayoutRail(db)
        self._clock = clock

    # --- Minting ----------------------------------------------------------------

    async def presale_mint(
        self, caller: Address, amount: int, proof: list[str], value: int,
    ) -> list[TokenId]:
        return await self._execute(
            "presale_mint", caller,
            lambda s: mint_engine.presale_mint(s, caller, amount, proof, value),
        )

    async def public_mint(self, caller: Address, amount: int, value: int) -> list[TokenId]:
        return await self._execute(
            "public_mint", caller,
            lambda s: mint_engine.public_mint(s, caller, amount, value),
        )

    async def batch_airdrop(
        self, caller: Address, recipients: list[Address],
    ) -> list[TokenId]:
        return await self._execute(
            "batch_airdrop", caller,
            lambda s: mint_engine.batch_airdrop(s, caller, recipients),
        )

    # --- Crafting / transfers ------------------------------------------------

    async def craft_and_upgrade(
        self, caller: Address, id_a: TokenId, id_b: TokenId, descriptor: str,
    ) -> TokenId:
        return await self._execute(
            "craft_and_upgrade", caller,
            lambda s: crafting.craft_and_upgrade(s, caller, id_a, id_b, descriptor),
        )

    async def transfer(
        self, caller: Address, from_addr: Address, to: Address, token_id: TokenId,
        safe: bool = False, data: bytes = b"",
    ) -> None:
        if safe:
            def run(s: CollectionState):
                transfer_guard.safe_transfer_from(s, caller, from_addr, to, token_id, data)
        else:
            def run(s: CollectionState):
                transfer_guard.transfer_from(s, caller, from_addr, to, token_id)
        await self._execute("transfer", caller, run)

    async def approve(self, caller: Address, to: Address, token_id: TokenId) -> None:
        await self._execute(
            "approve", caller, lambda s: ledger.approve(s, caller, to, token_id),
        )

    async def set_approval_for_all(
        self, caller: Address, operator: Address, approved: bool,
    ) -> None:
        await self._execute(
            "set_approval_for_all", caller,
            lambda s: ledger.set_approval_for_all(s, caller, operator, approved),
        )

    async def set_user(
        self, caller: Address, token_id: TokenId, user: Address, expires: int,
    ) -> None:
        await self._execute(
            "set_user", caller,
            lambda s: rental.set_user(s, caller, token_id, user, expires),
        )

    # --- Admin ------------------------------------------------------------------

    async def set_phase(self, caller: Address, phase: SalePhase) -> None:
        await self._execute(
            "set_phase", caller, lambda s: admin.set_phase(s, caller, phase),
        )

    async def set_presale_root(self, caller: Address, root: Digest) -> None:
        await self._execute(
            "set_presale_root", caller, lambda s: admin.set_presale_root(s, caller, root),
        )

    async def set_prices(
        self, caller: Address, public_price: int | None, presale_price: int | None,
    ) -> None:
        def run(s: CollectionState):
            if public_price is not None:
                admin.set_mint_price(s, caller, public_price)
            if presale_price is not None:
                admin.set_presale_price(s, caller, presale_price)
        await self._execute("set_prices", caller, run)

    async def pause(self, caller: Address) -> None:
        await self._execute("pause", caller, lambda s: access.pause(s, caller))

    async def unpause(self, caller: Address) -> None:
        await self._execute("unpause", caller, lambda s: access.unpause(s, caller))

    async def lock_soulbound(self, caller: Address, token_id: TokenId, locked: bool) -> None:
        await self._execute(
            "lock_soulbound", caller,
            lambda s: admin.lock_soulbound(s, caller, token_id, locked),
        )

    async def reveal(self, caller: Address, base_template: str) -> None:
        await self._execute(
            "reveal", caller, lambda s: metadata.reveal(s, caller, base_template),
        )

    async def grant_role(self, caller: Address, role: Role, account: Address) -> bool:
        return await self._execute(
            "grant_role", caller, lambda s: access.grant_role(s, caller, role, account),
        )

    async def revoke_role(self, caller: Address, role: Role, account: Address) -> bool:
        return await self._execute(
            "revoke_role", caller, lambda s: access.revoke_role(s, caller, role, account),
        )

    async def withdraw(self, caller: Address) -> tuple[Address, Wei]:
        async def settle(payout: tuple[Address, Wei]) -> None:
            recipient, amount = payout
            try:
                delivered = await self.payout_rail.send(recipient, amount)
            except SoulforgeError:
                raise
            except Exception as e:
                raise TreasuryError(str(e)) from e
            if not delivered:
                raise TreasuryError("payout rail did not deliver the funds")

        return await self._execute(
            "withdraw", caller, lambda s: admin.begin_withdrawal(s, caller), settle,
        )

    # --- Reads ------------------------------------------------------------------

    async def load(self) -> CollectionState:
        return await self.repository.load()

    async def token_uri(self, token_id: TokenId) -> str:
        return metadata.resolve(await self.load(), token_id)

    async def royalty_info(self, token_id: TokenId, sale_price: int) -> tuple[Address, Wei]:
        return royalty.royalty_info(await self.load(), token_id, sale_price)

    def now(self) -> int:
        """Current unix time, used for rental expiry."""
        return int(self._clock())

    @staticmethod
    def supports_interface(interface_id: str) -> bool:
        return supports_interface(interface_id)

    # --- Unit of work ---------------------------------------------------------

    async def _execute(
        self,
        operation: str,
        caller: Address | None,
        run: Callable[[CollectionState], T],
        settle: Callable[[T], Awaitable[None]] | None = None,
    ) -> T:
        async with _write_lock:
            try:
                state = await self.repository.load(for_update=True)
                result = run(state)
                await self.repository.save(state)
                if settle is not None:
                    await settle(result)
                await self.repository.append_events(state.drain_events(), caller)
                await self.db.commit()
            except SoulforgeError as e:
                await self.db.rollback()
                e.context.caller = e.context.caller or caller
                e.context.operation = e.context.operation or operation
                logger.warning(
                    f"{operation} rejected: {e.message}",
                    extra={"caller": caller, "operation": operation, "error_code": e.code},
                )
                raise

        logger.info(
            f"{operation} committed",
            extra={"caller": caller, "operation": operation},
        )
        return result
