"""Error Hierarchy: typed, categorized exceptions for console failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Parse and argument errors are recovered locally, before any backend contact
    - Service errors are logged and surfaced to the operator, never fatal
    - No error in this hierarchy ends the session (only the shutdown flag does)

Design Decisions:
    - Single hierarchy with ConsoleError base: the dispatcher can tell operator
      mistakes apart from backend failures by category alone
    - ArgumentError carries its own hint lines: the validator that knows what
      went wrong also knows what the operator should type instead
"""

import logging
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
}


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    PARSE = "parse"
    ARGUMENT = "argument"
    SERVICE = "service"


class ConsoleError(Exception):
    """Base exception for all console errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self.severity]

    def log_extra(self) -> dict:
        """Structured fields for the log record describing this error."""
        return {"error_code": self.code, "error_category": self.category.value}


# ─── Operator Errors (recovered locally) ────────────────────────

class ParseError(ConsoleError):
    """The first token of a line could not be resolved to a command."""
    def __init__(self, message: str, code: str = "PARSE_ERROR"):
        super().__init__(
            message, code, ErrorCategory.PARSE, ErrorSeverity.INFO,
        )


class UnrecognizedCommandError(ParseError):
    """Token is not part of the command vocabulary."""
    def __init__(self, token: str):
        super().__init__(
            f"Unrecognized command '{token}'", "UNRECOGNIZED_COMMAND",
        )
        self.token = token


class ArgumentError(ConsoleError):
    """Wrong token count or unparsable argument."""
    def __init__(
        self, message: str, field: str, hint_lines: list[str] | None = None,
        code: str = "ARGUMENT_ERROR",
    ):
        super().__init__(
            message, code, ErrorCategory.ARGUMENT, ErrorSeverity.INFO,
        )
        self.field = field
        self.hint_lines = hint_lines if hint_lines is not None else [message]


class PublicKeyError(ArgumentError):
    """Text is not a hex-encoded public key."""
    def __init__(self, message: str):
        super().__init__(message, "public_key", code="INVALID_PUBLIC_KEY")


class EmojiIdError(ArgumentError):
    """Text is not a valid emoji id."""
    def __init__(self, message: str):
        super().__init__(message, "emoji_id", code="INVALID_EMOJI_ID")


# ─── Backend Errors (logged + surfaced) ─────────────────────────

class ServiceError(ConsoleError):
    """A backend service call failed or returned an application-level error."""
    def __init__(self, service: str, message: str):
        super().__init__(
            f"{service}: {message}", "SERVICE_ERROR",
            ErrorCategory.SERVICE, ErrorSeverity.WARNING,
        )
        self.service = service


def error_code_of(exc: BaseException) -> str:
    """Code for logging any exception: ConsoleError codes, else the type name."""
    if isinstance(exc, ConsoleError):
        return exc.code
    return type(exc).__name__
