"""Parse bank SMS notifications into transactions and suggest categories."""

from sms_import.categorization import matches, suggest
from sms_import.parsers import get_parser_factory, parse_sms
from sms_import.schemas.internal import (
    Category,
    CategorySuggestion,
    Direction,
    ParsedTransaction,
    RawMessage,
)
from sms_import.core.banks import BankDialect

__version__ = "0.1.0"

__all__ = [
    "BankDialect",
    "Category",
    "CategorySuggestion",
    "Direction",
    "ParsedTransaction",
    "RawMessage",
    "get_parser_factory",
    "matches",
    "parse_sms",
    "suggest",
]
