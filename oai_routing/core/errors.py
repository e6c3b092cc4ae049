"""Error Hierarchy: typed, categorized exceptions for request construction.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors are raised synchronously while building; nothing is retried
    - MalformedURLError is a programming defect and is CRITICAL

Design Decisions:
    - Single hierarchy with RoutingError base: callers can catch one type
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    SERIALIZATION = "serialization"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    method: str | None = None
    debug_info: dict[str, Any] | None = None


class RoutingError(Exception):
    """Base exception for all request-construction errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Structured envelope for log records and error reports."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "method": self.context.method,
                    "debug_info": self.context.debug_info,
                },
            }
        }


class SerializationError(RoutingError):
    """Payload could not be encoded to JSON."""
    def __init__(self, message: str, payload_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Payload of type {payload_type} is not JSON serializable: {message}",
            "SERIALIZATION_ERROR", ErrorCategory.SERIALIZATION,
            ErrorSeverity.ERROR, context,
        )
        self.payload_type = payload_type


class MalformedURLError(RoutingError):
    """Base URL and resolved path do not combine into a valid URL."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Cannot build URL for path {path!r}: {message}",
            "MALFORMED_URL", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context,
        )
        self.path = path
