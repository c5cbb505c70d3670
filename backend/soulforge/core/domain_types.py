"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Address is always lowercase "0x" + 40 hex chars once normalized
    - TokenId is a positive int, assigned sequentially from 1
    - Wei is a non-negative int of arbitrary size
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and DB columns without custom encoders
"""

import re
from enum import Enum
from typing import NewType

from soulforge.core.errors import InvalidInputError


# ─── Identity Types ──────────────────────────────────────────────

Address = NewType("Address", str)
TokenId = NewType("TokenId", int)
Wei = NewType("Wei", int)
Digest = NewType("Digest", str)        # "0x" + 64 hex chars
InterfaceId = NewType("InterfaceId", str)  # "0x" + 8 hex chars

ZERO_ADDRESS = Address("0x" + "0" * 40)

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
_DIGEST_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


# ─── Limits ──────────────────────────────────────────────────────

BASIS_POINTS = 10_000
MAX_ROYALTY_BPS = 10_000
MAX_WEI = 2**256 - 1              # uint256, fits the String(78) wei columns
MAX_TIMESTAMP = 2**63 - 1         # signed 64-bit rental_expires column


# ─── Enums ───────────────────────────────────────────────────────

class SalePhase(str, Enum):
    """Sale availability mode. Any phase may follow any other."""
    CLOSED = "closed"
    PRESALE = "presale"
    PUBLIC_SALE = "public_sale"


class Role(str, Enum):
    """Permission tags held in the role store."""
    DEFAULT_ADMIN = "DEFAULT_ADMIN_ROLE"
    MINTER = "MINTER_ROLE"


class EventName(str, Enum):
    """Collection events — appended on commit, never on abort."""
    TRANSFER = "Transfer"
    APPROVAL = "Approval"
    APPROVAL_FOR_ALL = "ApprovalForAll"
    PRESALE_CLAIMED = "PresaleClaimed"
    PHASE_CHANGED = "PhaseChanged"
    PRESALE_ROOT_CHANGED = "PresaleRootChanged"
    PRICE_CHANGED = "PriceChanged"
    PAUSED = "Paused"
    UNPAUSED = "Unpaused"
    SOULBOUND_SET = "SoulboundSet"
    CRAFTED = "Crafted"
    REVEALED = "Revealed"
    WITHDRAWN = "Withdrawn"
    ROLE_GRANTED = "RoleGranted"
    ROLE_REVOKED = "RoleRevoked"
    UPDATE_USER = "UpdateUser"


# ─── Normalizers ─────────────────────────────────────────────────

def normalize_address(value: str, field: str = "address") -> Address:
    """Validate and lowercase an address. Raises InvalidInputError."""
    if not isinstance(value, str) or not _ADDRESS_RE.match(value):
        raise InvalidInputError(f"{field} must be 0x followed by 40 hex chars", field)
    return Address(value.lower())


def normalize_digest(value: str, field: str = "digest") -> Digest:
    """Validate and lowercase a 32-byte hex digest. Raises InvalidInputError."""
    if not isinstance(value, str) or not _DIGEST_RE.match(value):
        raise InvalidInputError(f"{field} must be 0x followed by 64 hex chars", field)
    return Digest(value.lower())
