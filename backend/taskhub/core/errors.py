"""Error Hierarchy — typed, categorized exceptions for every gateway failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only two kinds reach a client: UnauthorizedError and EngineFailureError
    - EngineError subclasses are raised by engines and credential stores, and are
      wrapped in EngineFailureError by the dispatcher or resolve_identity
    - to_response() has identical keys for every kind and operation
    - No engine detail leaked in user-facing messages (context is for logs only)

Design Decisions:
    - Single hierarchy with GatewayError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Not-found is an engine-internal distinction; the gateway collapses it into
      ENGINE_FAILURE like every other engine error
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
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    ENGINE = "engine"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_kind: str | None = None
    operation: str | None = None
    entity_id: str | None = None
    member_id: str | None = None
    debug_info: dict[str, Any] | None = None


class GatewayError(Exception):
    """Base exception for all gateway and engine errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }

    def log_extra(self) -> dict:
        """Structured fields for logger `extra=` (None values dropped by formatter)."""
        return {
            "error_code": self.code,
            "entity_kind": self.context.entity_kind,
            "operation": self.context.operation,
            "entity_id": self.context.entity_id,
            "member_id": self.context.member_id,
        }


# ─── Gateway Boundary Errors ────────────────────────────────────

class UnauthorizedError(GatewayError):
    """API key missing, malformed, or not bound to a known member."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            "Missing or invalid API key",
            "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.reason = reason


class EngineFailureError(GatewayError):
    """Any failure the engine reported, collapsed into one generic shape."""
    def __init__(self, cause: "EngineError", context: ErrorContext | None = None):
        super().__init__(
            "The requested operation could not be completed",
            "ENGINE_FAILURE", ErrorCategory.ENGINE,
            ErrorSeverity.ERROR, context, 500,
        )
        self.cause = cause


# ─── Engine Errors (raised by Engine implementations) ───────────

class EngineError(GatewayError):
    """Base for failures reported by an engine."""


class EntityNotFoundError(EngineError):
    """Requested entity does not exist."""
    def __init__(
        self, kind: str, entity_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{kind} '{entity_id}' not found",
            "ENTITY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.kind = kind
        self.entity_id = entity_id


class EngineValidationError(EngineError):
    """Engine rejected an input the schema allowed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "ENGINE_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class StorageError(EngineError):
    """Storage operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
