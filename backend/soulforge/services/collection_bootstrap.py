"""Collection Bootstrap — seeds the singleton collection row from settings.

Invariants:
    - Idempotent: an existing collection is never overwritten (cap stays immutable)
    - Genesis goes through core/genesis.py so the owner gets its roles

Design Decisions:
    - Seeded on startup rather than by migration: genesis parameters are deployment
      config, the schema is not
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from soulforge.config import Settings
from soulforge.core.domain_types import normalize_address
from soulforge.core.genesis import initialize_collection
from soulforge.infrastructure.collection_repository import SqlCollectionRepository

logger = logging.getLogger(__name__)


async def ensure_collection(db: AsyncSession, settings: Settings) -> bool:
    """Create the collection if missing. Returns True when it was created."""
    repository = SqlCollectionRepository(db)
    if await repository.exists():
        return False

    owner = normalize_address(settings.owner_address, "owner_address")
    receiver = (
        normalize_address(settings.royalty_receiver, "royalty_receiver")
        if settings.royalty_receiver else None
    )
    state = initialize_collection(
        name=settings.collection_name,
        symbol=settings.collection_symbol,
        owner=owner,
        cap=settings.max_supply,
        public_price=settings.public_price_wei,
        presale_price=settings.presale_price_wei,
        placeholder_descriptor=settings.placeholder_uri,
        royalty_receiver=receiver,
        royalty_bps=settings.royalty_bps,
    )
    await repository.create(state)
    await db.commit()
    logger.info(
        f"Collection {settings.collection_name} created with cap {settings.max_supply}",
        extra={"caller": owner, "operation": "genesis"},
    )
    return True
