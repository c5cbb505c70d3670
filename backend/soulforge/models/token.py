"""Token ORM — one row per live unit.

Invariants:
    - token_id is the primary key and is never reused (burned rows are deleted,
      their ids are never reissued because issued_count only grows)
    - owner is never the zero address

Design Decisions:
    - Approval and rental bookkeeping denormalized onto the token row: both are
      per-unit and cleared together with ownership changes
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text, BigInteger
from sqlalchemy.orm import Mapped, mapped_column

from soulforge.db.base import Base


class Token(Base):
    """Token entity — owner, soul-bound flag, descriptor override."""
    __tablename__ = "tokens"

    token_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    owner: Mapped[str] = mapped_column(String(42), nullable=False, index=True)
    locked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    descriptor_override: Mapped[str | None] = mapped_column(Text, nullable=True)
    approved: Mapped[str | None] = mapped_column(String(42), nullable=True)
    rental_user: Mapped[str | None] = mapped_column(String(42), nullable=True)
    rental_expires: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    minted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
