"""Collection ORM — the singleton row holding collection-wide state.

Invariants:
    - Exactly one row, id = 1
    - cap is written at genesis and never updated
    - issued_count never decreases

Design Decisions:
    - Wei columns use WeiAmount (decimal strings) for exactness on every backend
    - phase stored as its SalePhase string value
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from soulforge.db.base import Base
from soulforge.db.types import WeiAmount

COLLECTION_ID = 1


class Collection(Base):
    """Collection singleton — cap, counters, sale config, metadata switches."""
    __tablename__ = "collections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=COLLECTION_ID)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    symbol: Mapped[str] = mapped_column(String(20), nullable=False)
    owner: Mapped[str] = mapped_column(String(42), nullable=False)
    cap: Mapped[int] = mapped_column(Integer, nullable=False)
    issued_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    phase: Mapped[str] = mapped_column(String(20), nullable=False, default="closed")
    public_price: Mapped[int] = mapped_column(WeiAmount, nullable=False, default=0)
    presale_price: Mapped[int] = mapped_column(WeiAmount, nullable=False, default=0)
    allow_list_root: Mapped[str | None] = mapped_column(String(66), nullable=True)
    revealed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    placeholder_descriptor: Mapped[str] = mapped_column(Text, nullable=False, default="")
    base_descriptor_template: Mapped[str] = mapped_column(Text, nullable=False, default="")
    paused: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    royalty_receiver: Mapped[str] = mapped_column(String(42), nullable=False)
    royalty_bps: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    balance: Mapped[int] = mapped_column(WeiAmount, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
