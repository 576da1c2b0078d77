"""Parser factory for routing messages to dialect grammars.

This module orchestrates the parsing workflow:
1. Detect the bank dialect using DialectDetector
2. Select the dialect's parser refinement
3. Parse and return a ParsedTransaction

``parse`` never raises for malformed input: an unrecognized dialect and
an unreadable amount both come back as ``None``. ``parse_or_raise``
keeps the two apart for callers that want to tell them apart.
"""

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo

from sms_import.config import settings
from sms_import.core.banks import BankDialect
from sms_import.core.exceptions import (
    AmountUnreadableError,
    DialectNotRecognizedError,
    ParsingError,
    SmsProcessingError,
)
from sms_import.core.logger import filter_pii
from sms_import.parsers.detector import DialectDetector
from sms_import.parsers.generic import GenericSmsParser
from sms_import.parsers.refinements import (
    ACBParser,
    BIDVParser,
    TechcombankParser,
    VietcombankParser,
    VPBankParser,
)
from sms_import.schemas.internal import ParsedTransaction

logger = logging.getLogger(__name__)


class SmsParserFactory:
    """Factory for parsing bank SMS notifications.

    The factory handles the complete parsing workflow:
    - Detects which bank dialect produced the message
    - Routes to the dialect's parser refinement
    - Returns a structured ParsedTransaction, or None

    Example:
        >>> factory = get_parser_factory()
        >>> txn = factory.parse("TCB: GD -500,000d Tai: STARBUCKS* Luc 14:30 21/11/25")
        >>> print(txn.amount, txn.direction.value, txn.merchant_text)
        500000 debit STARBUCKS
    """

    def __init__(
        self,
        detector: DialectDetector | None = None,
        clock: Callable[[], datetime] | None = None,
        tz: tzinfo | None = None,
    ):
        """Initialize the parser factory.

        Args:
            detector: Dialect detector instance (default: new DialectDetector)
            clock: Source of "now" for timestamp fallbacks
            tz: Zone attached to parsed timestamps (naive when None)
        """
        self.detector = detector or DialectDetector()
        self.clock = clock
        self.tz = tz

        # Registry of dialect parsers
        # Format: {BankDialect: ParserClass}
        self._refinements: dict[BankDialect, type[GenericSmsParser]] = {}

    def parse(self, body: str | None, sender: str | None = None) -> ParsedTransaction | None:
        """Parse a message, returning None when it cannot be imported.

        Args:
            body: Message text
            sender: Optional sender id

        Returns:
            ParsedTransaction, or None for unrecognized / unreadable messages
        """
        try:
            return self.parse_or_raise(body, sender)
        except SmsProcessingError as exc:
            logger.debug(
                "Message not imported (%s): %s",
                exc.error_code,
                filter_pii(body or ""),
                extra={"error_code": exc.error_code},
            )
            return None

    def parse_or_raise(self, body: str | None, sender: str | None = None) -> ParsedTransaction:
        """Parse a message, raising on failure.

        Raises:
            DialectNotRecognizedError: If no dialect matches (SMS_001)
            AmountUnreadableError: If the dialect matched but the amount
                could not be read (SMS_002)
        """
        dialect = self.detector.detect(body, sender)
        if dialect is None:
            raise DialectNotRecognizedError(details={"sender": sender})

        parser_class = self._get_parser_class(dialect)
        if parser_class is None:
            raise DialectNotRecognizedError(
                details={"sender": sender, "dialect": dialect.value, "reason": "no parser registered"}
            )

        parser = parser_class(clock=self.clock, tz=self.tz)
        try:
            transaction = parser.parse(body)
        except ParsingError as exc:
            raise AmountUnreadableError(
                details={"dialect": dialect.value, **exc.details}
            ) from exc

        logger.debug(
            "Parsed %s message: amount=%s direction=%s",
            dialect.value,
            transaction.amount,
            transaction.direction.value,
            extra={"dialect": dialect.value},
        )
        return transaction

    def register_refinement(self, dialect: BankDialect, parser_class: type[GenericSmsParser]):
        """Register the parser for a dialect.

        Args:
            dialect: Dialect the parser handles
            parser_class: Parser class (must inherit from GenericSmsParser)
        """
        if not issubclass(parser_class, GenericSmsParser):
            raise ValueError(
                f"Parser class must inherit from GenericSmsParser, got {parser_class}"
            )

        self._refinements[dialect] = parser_class

    def unregister_refinement(self, dialect: BankDialect):
        """Remove a dialect parser; messages of that dialect become unrecognized."""
        self._refinements.pop(dialect, None)

    def get_registered_dialects(self) -> list[BankDialect]:
        """Get list of dialects with registered parsers."""
        return list(self._refinements.keys())

    def _get_parser_class(self, dialect: BankDialect) -> type[GenericSmsParser] | None:
        return self._refinements.get(dialect)


DEFAULT_REFINEMENTS: dict[BankDialect, type[GenericSmsParser]] = {
    BankDialect.VIETCOMBANK: VietcombankParser,
    BankDialect.TECHCOMBANK: TechcombankParser,
    BankDialect.VPBANK: VPBankParser,
    BankDialect.ACB: ACBParser,
    BankDialect.BIDV: BIDVParser,
}


def build_parser_factory(
    clock: Callable[[], datetime] | None = None,
    tz: tzinfo | None = None,
) -> SmsParserFactory:
    """Create a factory with every built-in dialect registered."""
    factory = SmsParserFactory(clock=clock, tz=tz)
    for dialect, parser_class in DEFAULT_REFINEMENTS.items():
        factory.register_refinement(dialect, parser_class)
    return factory


# Singleton factory instance for global use
_factory_instance: SmsParserFactory | None = None


def get_parser_factory() -> SmsParserFactory:
    """Get or create the global SmsParserFactory instance.

    Returns:
        Global SmsParserFactory singleton
    """
    global _factory_instance
    if _factory_instance is None:
        _factory_instance = build_parser_factory(tz=settings.tzinfo)
    return _factory_instance


def parse_sms(body: str | None, sender: str | None = None) -> ParsedTransaction | None:
    """Convenience function to parse a message using the global factory."""
    return get_parser_factory().parse(body, sender)
