"""OperatorApproval ORM — owner-wide operator grants for the ledger."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from soulforge.db.base import Base


class OperatorApproval(Base):
    __tablename__ = "operator_approvals"

    owner: Mapped[str] = mapped_column(String(42), primary_key=True)
    operator: Mapped[str] = mapped_column(String(42), primary_key=True)
