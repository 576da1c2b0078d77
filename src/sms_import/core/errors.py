"""Error codes and user-friendly messages.

This module defines the error catalog for SMS import.
Each error has:
- error_code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

# Error catalog for SMS import
ERROR_CATALOG: dict[str, dict] = {
    "SMS_001": {
        "code": "SMS_001",
        "message": "Message does not match any supported bank dialect",
        "user_message": "This message doesn't look like a bank notification we support.",
        "suggestion": "Supported banks: Vietcombank, Techcombank, VPBank, ACB, BIDV. Add the transaction manually.",
        "retry_allowed": False,
    },
    "SMS_002": {
        "code": "SMS_002",
        "message": "Bank dialect recognized but the amount could not be extracted",
        "user_message": "We saw a message from your bank but couldn't read the amount.",
        "suggestion": "Please enter this transaction manually.",
        "retry_allowed": False,
    },
    "CAT_001": {
        "code": "CAT_001",
        "message": "Category resolver called without a candidate list",
        "user_message": "We couldn't suggest a category for this transaction.",
        "suggestion": "Pick a category manually.",
        "retry_allowed": False,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details (a generic entry for unknown codes)
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str) -> str:
    """Get user-friendly message for an error code."""
    return get_error(error_code)["user_message"]


def get_suggestion(error_code: str) -> str:
    """Get actionable suggestion for an error code."""
    return get_error(error_code)["suggestion"]


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
