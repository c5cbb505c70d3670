"""Payout Rail — default value movement for withdrawals.

Invariants:
    - send() records the payout in the caller's transaction: if the withdrawal
      aborts later, the payout row rolls back with it
    - Returns True on success; any failure surfaces as False or an exception,
      which the service turns into TreasuryError

Design Decisions:
    - Settlement ledger row over a live chain call: the collection's balance is
      custodial bookkeeping here (ADR: external settlement reads the payouts table)
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from soulforge.core.domain_types import Address, Wei
from soulforge.models.payout import Payout

logger = logging.getLogger(__name__)


class DatabasePayoutRail:
    """PayoutRail that books the payout into the payouts table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def send(self, recipient: Address, amount: Wei) -> bool:
        self.db.add(Payout(recipient=recipient, amount=amount))
        await self.db.flush()
        logger.info(
            f"Payout of {amount} wei booked for {recipient}",
            extra={"operation": "withdraw", "amount": amount},
        )
        return True
