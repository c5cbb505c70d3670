"""RoleAssignment ORM — (role, account) membership rows for the role store."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from soulforge.db.base import Base


class RoleAssignment(Base):
    __tablename__ = "role_assignments"

    role: Mapped[str] = mapped_column(String(40), primary_key=True)
    account: Mapped[str] = mapped_column(String(42), primary_key=True)
