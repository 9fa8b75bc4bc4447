"""Error Hierarchy — typed, categorized exceptions for every OrderFlow failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found and unauthenticated outcomes are INFO severity: expected, never logged as errors
    - StoreError is never raised for a missing record; callers must not read it as "absent"
    - Cancellation is not part of this hierarchy: asyncio.CancelledError propagates unchanged
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with OrderFlowError base: one FastAPI handler covers all of it
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    AUTHENTICATION = "authentication"
    STORAGE = "storage"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    order_id: str | None = None
    username: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class OrderFlowError(Exception):
    """Base exception for all OrderFlow errors."""

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
                "context": {
                    "order_id": self.context.order_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class OrderNotFoundError(OrderFlowError):
    """No order with the requested identifier exists."""
    def __init__(self, order_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.order_id = order_id
        super().__init__(
            f"Order '{order_id}' not found",
            "ORDER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )


class OrderAlreadyExistsError(OrderFlowError):
    """An order with the same identifier is already stored."""
    def __init__(self, order_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.order_id = order_id
        super().__init__(
            f"Order '{order_id}' already exists",
            "ORDER_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )


class UnauthenticatedError(OrderFlowError):
    """Session missing, unknown, expired, or credentials rejected."""
    def __init__(self, reason: str = "unauthorized", context: ErrorContext | None = None):
        super().__init__(
            reason, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.INFO, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(OrderFlowError):
    """A backing store (database or key-value) failed."""
    def __init__(
        self,
        message: str,
        backend: str,
        operation: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"{backend} {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.backend = backend
        self.operation = operation


class DeadlineExceededError(OrderFlowError):
    """An operation did not finish within its deadline."""
    def __init__(
        self, operation: str, timeout_seconds: float, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Operation '{operation}' exceeded its {timeout_seconds:g}s deadline",
            "DEADLINE_EXCEEDED", ErrorCategory.TIMEOUT,
            ErrorSeverity.ERROR, ctx, 504,
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds
