"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Collection is a singleton row; tokens, claims, roles, approvals hang off it

Design Decisions:
    - One file per entity for locality (ADR: max 3-4 files to understand a feature)
    - All models imported here so Base.metadata is complete before create_all / alembic
"""

from soulforge.models.collection import Collection  # noqa: F401
from soulforge.models.token import Token  # noqa: F401
from soulforge.models.presale_claim import PresaleClaim  # noqa: F401
from soulforge.models.role_assignment import RoleAssignment  # noqa: F401
from soulforge.models.operator_approval import OperatorApproval  # noqa: F401
from soulforge.models.collection_event import CollectionEvent  # noqa: F401
from soulforge.models.payout import Payout  # noqa: F401
