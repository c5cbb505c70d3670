"""PresaleClaim ORM — per-identity presale record.

Invariants:
    - At most one row per account; a row is written once and never updated
    - amount > 0 (a zero claim is never persisted)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from soulforge.db.base import Base


class PresaleClaim(Base):
    __tablename__ = "presale_claims"

    account: Mapped[str] = mapped_column(String(42), primary_key=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    claimed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
