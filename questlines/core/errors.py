"""Error Hierarchy — typed, categorized exceptions for all Questlines failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400/404) are recoverable; storage errors (500) are critical
    - to_response() produces the REST envelope: {"error": message, "code": code}
    - No driver internals leaked in user-facing messages

Design Decisions:
    - Single hierarchy with QuestlinesError base: FastAPI global handler catches all
    - ErrorContext as dataclass: carries operation + questline id for log records
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


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
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for log records."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    questline_id: str | None = None


class QuestlinesError(Exception):
    """Base exception for all Questlines errors."""

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
        """Convert to the REST error body."""
        return {"error": self.message, "code": self.code}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "severity": self.severity.value,
            "occurred_at": self.context.timestamp.isoformat(),
            "operation": self.context.operation,
            "questline_id": self.context.questline_id,
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class ValidationError(QuestlinesError):
    """Request input is missing, malformed or inconsistent."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class NotFoundError(QuestlinesError):
    """Requested aggregate does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(QuestlinesError):
    """Relational store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
