"""Request Dependencies — caller identity and service wiring.

Invariants:
    - Caller identity comes from the X-Caller-Address header, lowercased
    - A missing or malformed header is a 400 VALIDATION_ERROR, never anonymous access

Design Decisions:
    - Header-based identity: request signing is handled by the gateway in front of
      this API (ADR: no signature schemes in the core)
    - get_payout_rail is its own dependency so deployments and tests can swap rails
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from soulforge.core.domain_types import Address, normalize_address
from soulforge.core.errors import InvalidInputError
from soulforge.core.repository_protocols import PayoutRail
from soulforge.infrastructure.database import get_db
from soulforge.infrastructure.payout_rail import DatabasePayoutRail
from soulforge.services.collection_service import CollectionService


async def get_caller(
    x_caller_address: str | None = Header(None),
) -> Address:
    if not x_caller_address:
        raise InvalidInputError("X-Caller-Address header is required", "X-Caller-Address")
    return normalize_address(x_caller_address, "X-Caller-Address")


async def get_payout_rail(db: AsyncSession = Depends(get_db)) -> PayoutRail:
    return DatabasePayoutRail(db)


async def get_collection_service(
    db: AsyncSession = Depends(get_db),
    payout_rail: PayoutRail = Depends(get_payout_rail),
) -> CollectionService:
    return CollectionService(db, payout_rail=payout_rail)
