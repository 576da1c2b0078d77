"""Custom exception classes for SMS transaction import.

This module defines a hierarchy of exceptions used throughout the
parse -> categorize pipeline. Each exception maps to a specific
error code defined in errors.py.

The public ``parse`` entry points never let these escape for malformed
input; they are raised internally and by the ``*_or_raise`` variants.
"""

from typing import Any


class SmsProcessingError(Exception):
    """Base exception for all SMS processing errors.

    All custom exceptions inherit from this base class and include
    an error_code that maps to the error catalog.

    Attributes:
        error_code: Code from the error catalog (e.g., "SMS_001")
        details: Additional context about the error (for logging)
    """

    default_code = "UNKNOWN"

    def __init__(
        self,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize the exception.

        Args:
            error_code: Error code from errors.py (default: the class default)
            details: Additional error context (not shown to users)
        """
        self.error_code = error_code or self.default_code
        self.details = details or {}
        super().__init__(self.error_code)


class DialectNotRecognizedError(SmsProcessingError):
    """Raised when no bank dialect matches the message.

    The message carried none of the recognition markers or layout
    signatures. Maps to error code SMS_001.
    """

    default_code = "SMS_001"


class ParsingError(SmsProcessingError):
    """Raised when a recognized message cannot be extracted.

    Common causes:
    - Amount sub-pattern missing (SMS_002)
    - Amount token not numeric after punctuation stripping (SMS_002)
    """

    default_code = "SMS_002"


class AmountNotFoundError(ParsingError):
    """Raised when a dialect's amount pattern matches nothing."""

    pass


class MalformedAmountError(ParsingError):
    """Raised when the captured amount token is not a valid magnitude."""

    pass


class AmountUnreadableError(SmsProcessingError):
    """Raised to callers when a bank message was seen but its amount was not.

    Wraps AmountNotFoundError / MalformedAmountError at the factory
    boundary. Maps to error code SMS_002.
    """

    default_code = "SMS_002"


class CategorizationError(SmsProcessingError):
    """Raised when the resolver is called in breach of its contract.

    This is a programming error (e.g., a ``None`` candidate list), not
    a data problem. Maps to error code CAT_001.
    """

    default_code = "CAT_001"
