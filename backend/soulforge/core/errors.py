"""Error Hierarchy — typed, categorized exceptions for every abort reason.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Raising any SoulforgeError aborts the whole call: the shell rolls back all writes
    - Domain errors (400-level) are caller-correctable; infrastructure errors are critical
    - to_response() produces the REST envelope; code is the machine-readable reason tag

Design Decisions:
    - Single hierarchy with SoulforgeError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - No retry anywhere: the caller re-submits with corrected inputs
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    caller: str | None = None
    operation: str | None = None
    token_id: int | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class SoulforgeError(Exception):
    """Base exception for all Soulforge errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "caller": self.context.caller,
                    "operation": self.context.operation,
                    "token_id": self.context.token_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class PhaseInactiveError(SoulforgeError):
    """Entry point called outside its required sale phase."""
    def __init__(self, required: str, current: str, context: ErrorContext | None = None):
        super().__init__(
            f"Sale phase {required} is not active (current: {current})",
            "PHASE_INACTIVE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.required = required
        self.current = current


class AuthorizationError(SoulforgeError):
    """Caller lacks the required role, ownership, or owner privilege."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHORIZATION_ERROR", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.ERROR, context, 403,
        )


class PaymentError(SoulforgeError):
    """Attached value is below the price of the requested quantity."""
    def __init__(self, required: int, attached: int, context: ErrorContext | None = None):
        super().__init__(
            f"Insufficient payment: required {required} wei, attached {attached} wei",
            "PAYMENT_ERROR", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 402,
        )
        self.required = required
        self.attached = attached


class SupplyError(SoulforgeError):
    """Requested issuance would push issued_count past the cap."""
    def __init__(
        self, requested: int, issued: int, cap: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Supply exceeded: {issued} issued + {requested} requested > cap {cap}",
            "SUPPLY_EXCEEDED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.requested = requested
        self.issued = issued
        self.cap = cap


class AllowListError(SoulforgeError):
    """Proof failed verification, or the identity already claimed its presale."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "ALLOW_LIST_ERROR", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.ERROR, context, 403,
        )


class StateError(SoulforgeError):
    """Invalid state transition (second reveal, duplicate crafting ids, ...)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STATE_ERROR", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )


class TransferError(SoulforgeError):
    """A soul-bound unit was asked to move between identities."""
    def __init__(self, token_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.token_id = token_id
        super().__init__(
            f"Token {token_id} is soul-bound and cannot be transferred",
            "TRANSFER_ERROR", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 423,
        )
        self.token_id = token_id


class InvalidInputError(SoulforgeError):
    """Malformed argument (address, digest, amount) rejected before any state read."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(SoulforgeError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class TreasuryError(SoulforgeError):
    """Value movement failed during withdrawal; the whole call aborts."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Withdrawal failed: {message}",
            "TREASURY_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )


class DatabaseError(SoulforgeError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
