"""Column Types — wei amounts stored losslessly on every backend.

Invariants:
    - WeiAmount round-trips any non-negative int exactly (no float, no 64-bit limit)

Design Decisions:
    - Decimal string in a VARCHAR over NUMERIC: SQLite would coerce large NUMERIC
      values to REAL and silently lose precision
"""

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class WeiAmount(TypeDecorator):
    """Arbitrary-size non-negative integer persisted as a decimal string."""

    impl = String(78)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(int(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return int(value)
