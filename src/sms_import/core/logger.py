"""Logging setup with PII filtering.

Bank notifications carry account fragments, balances and phone numbers.
Anything derived from raw message text goes through ``filter_pii`` before
it reaches a handler.
"""

import json
import logging
import re
import sys
from pathlib import Path

# Configure logging format
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# PII patterns to filter from logs
PII_PATTERNS = [
    # Card numbers (any 13-19 digit sequence, with or without spaces/dashes)
    (re.compile(r"\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{3,7}\b"), "[CARD]"),
    # Masked account numbers in bank SMS ("TK ...1234", "****1234", "TK 12345678")
    (re.compile(r"(?:\.{3}|\*{2,})\d{3,}"), "[ACCOUNT]"),
    (re.compile(r"\b(TK|Tai khoan)\s+\d{6,}\b", re.I), r"\1 [ACCOUNT]"),
    # Balance after transaction ("SD: 5,234,000 VND")
    (re.compile(r"\bSD:\s*[\d,\.]+\s*(?:VND|d)?", re.I), "SD: [BALANCE]"),
    # Email addresses
    (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"), "[EMAIL]"),
    # Phone numbers (international format)
    (re.compile(r"\+\d{1,3}[-.\s]?\(?\d{2,4}\)?[-.\s]?\d{3,4}[-.\s]?\d{4,5}"), "[PHONE]"),
]


def filter_pii(text: str) -> str:
    """Remove PII from text using regex patterns.

    Args:
        text: Input text that may contain PII

    Returns:
        Text with PII replaced by placeholders
    """
    if not text:
        return text

    filtered = text
    for pattern, replacement in PII_PATTERNS:
        filtered = pattern.sub(replacement, filtered)

    return filtered


class PIIFilter(logging.Filter):
    """Scrub PII from every record passing through a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = filter_pii(record.getMessage())
        record.args = None
        return True


class JSONLogFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": filter_pii(record.getMessage()),
        }

        if hasattr(record, "error_code"):
            log_data["error_code"] = record.error_code
        if hasattr(record, "dialect"):
            log_data["dialect"] = record.dialect

        if record.exc_info:
            log_data["exception"] = filter_pii(self.formatException(record.exc_info))

        return json.dumps(log_data)


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JSONLogFormatter()
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    json_format: bool = False,
) -> None:
    """
    Configure root logger.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Optional log file path
        json_format: Emit one JSON object per line instead of plain text
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(_build_formatter(json_format))
    console_handler.addFilter(PIIFilter())

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(_build_formatter(json_format))
        file_handler.addFilter(PIIFilter())
        root_logger.addHandler(file_handler)


def setup_logging_from_settings() -> None:
    """Configure logging from the library settings."""
    from sms_import.config import settings

    setup_logging(settings.log_level, settings.log_file, settings.log_json)
