"""SMS parsing module for bank transaction notifications.

This module turns free-text bank notifications into structured
transactions using a hybrid architecture:
- DialectDetector picks the issuing bank from markers in the text
- GenericSmsParser holds the amount -> merchant -> timestamp template
- Bank-specific refinements override only what's different
"""

from sms_import.parsers.detector import DialectDetector
from sms_import.parsers.factory import SmsParserFactory, get_parser_factory, parse_sms
from sms_import.parsers.generic import GenericSmsParser

__all__ = [
    "DialectDetector",
    "GenericSmsParser",
    "SmsParserFactory",
    "get_parser_factory",
    "parse_sms",
]
