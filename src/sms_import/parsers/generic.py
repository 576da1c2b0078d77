"""Generic bank SMS parser.

This module provides the GenericSmsParser class which holds the
extraction template shared by every dialect:

1. amount (load-bearing: failure aborts the record)
2. merchant (best effort: falls back to a per-dialect label)
3. timestamp (best effort: falls back to "now")

Bank-specific refinements inherit from this and override only the
patterns and hooks that differ.
"""

import logging
import re
from collections.abc import Callable
from datetime import datetime, tzinfo
from decimal import Decimal, InvalidOperation

from sms_import.core.banks import BankDialect
from sms_import.core.exceptions import AmountNotFoundError, MalformedAmountError
from sms_import.schemas.internal import Direction, ParsedTransaction

logger = logging.getLogger(__name__)

# Digits with optional thousands grouping ("500,000", "1.250.000").
# Must start and end on a whole number: never a fragment of "15O,000" or "1,50,000".
AMOUNT_TOKEN = r"(?<![\w,.])(?P<amount>\d{1,3}(?:[,.]\d{3})*)(?![\w,.]*\d)"


class GenericSmsParser:
    """Template parser for VND bank notifications.

    Subclasses set the class-level patterns and may override:
        - _direction_from(): how the sign / verb maps to debit or credit
        - _clean_merchant(): dialect-specific merchant cleanup
        - _amount_region(): which part of the text may hold the amount

    Patterns use named groups so the field order of each dialect's
    date layout lives in the pattern itself:
        - AMOUNT_PATTERN: ``sign`` (optional) and ``amount``
        - MERCHANT_PATTERN: group 1 is the merchant
        - TIMESTAMP_PATTERN: ``day``, ``month``, ``year``, ``hour``, ``minute``

    Example:
        >>> parser = VietcombankParser()
        >>> txn = parser.parse("TK ...1234 -150,000 VND 05/03/25 09:15. Tai STARBUCKS. SD: 0 VND")
        >>> txn.amount, txn.merchant_text
        (Decimal('150000'), 'STARBUCKS')
    """

    dialect: BankDialect | None = None

    FALLBACK_MERCHANT = "Bank Transaction"

    AMOUNT_PATTERN: re.Pattern = re.compile(
        r"(?P<sign>[-+]?)" + AMOUNT_TOKEN + r"\s*VND", re.IGNORECASE
    )
    MERCHANT_PATTERN: re.Pattern | None = None
    TIMESTAMP_PATTERN: re.Pattern | None = None

    # Post-transaction balance clause ("SD: 5,234,000 VND"); never the amount
    BALANCE_PATTERN = re.compile(r"\bSD\s*:?\s*[-+]?[\d,.]+\s*(?:VND|d)?", re.IGNORECASE)

    GROUPING_PATTERN = re.compile(r"[,.]")

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        tz: tzinfo | None = None,
    ):
        """Initialize the parser.

        Args:
            clock: Source of "now" for the timestamp fallback
            tz: Zone attached to parsed timestamps (naive when None)
        """
        self.tz = tz
        self.clock = clock or (lambda: datetime.now(self.tz))

    def parse(self, text: str) -> ParsedTransaction:
        """Parse a message already attributed to this parser's dialect.

        Args:
            text: Message body

        Returns:
            ParsedTransaction with extracted data

        Raises:
            AmountNotFoundError: If the amount pattern matches nothing
            MalformedAmountError: If the amount token is not a valid magnitude
        """
        if self.dialect is None:
            raise TypeError(f"{type(self).__name__} has no dialect; use a refinement")

        amount, direction = self._find_amount(text)
        merchant_text = self._find_merchant(text)
        occurred_at = self._find_timestamp(text)

        return ParsedTransaction(
            amount=amount,
            direction=direction,
            merchant_text=merchant_text,
            occurred_at=occurred_at,
            source_dialect=self.dialect,
            raw_text=text,
        )

    def _amount_region(self, text: str) -> str:
        """Text the amount may be taken from (balance clauses blanked out)."""
        return self.BALANCE_PATTERN.sub(" ", text)

    def _find_amount(self, text: str) -> tuple[Decimal, Direction]:
        match = self.AMOUNT_PATTERN.search(self._amount_region(text))
        if not match:
            raise AmountNotFoundError(details={"dialect": self._dialect_code()})

        amount = self._parse_amount(match.group("amount"))
        return amount, self._direction_from(match, text)

    def _parse_amount(self, token: str) -> Decimal:
        """Strip grouping punctuation and parse as a non-negative magnitude.

        Raises:
            MalformedAmountError: If the token does not parse or is negative
        """
        cleaned = self.GROUPING_PATTERN.sub("", token or "")
        try:
            amount = Decimal(cleaned)
        except InvalidOperation as exc:
            raise MalformedAmountError(
                details={"dialect": self._dialect_code(), "token": token}
            ) from exc

        if not amount.is_finite() or amount < 0:
            raise MalformedAmountError(
                details={"dialect": self._dialect_code(), "token": token}
            )
        return amount

    def _direction_from(self, match: re.Match, text: str) -> Direction:
        """Leading ``-`` means money left the account."""
        return Direction.DEBIT if match.group("sign") == "-" else Direction.CREDIT

    def _find_merchant(self, text: str) -> str:
        if self.MERCHANT_PATTERN is None:
            return self.FALLBACK_MERCHANT

        match = self.MERCHANT_PATTERN.search(text)
        if not match:
            return self.FALLBACK_MERCHANT

        merchant = self._clean_merchant(match.group(1))
        return merchant or self.FALLBACK_MERCHANT

    def _clean_merchant(self, raw: str) -> str:
        return re.sub(r"\s+", " ", raw or "").strip()

    def _find_timestamp(self, text: str) -> datetime:
        if self.TIMESTAMP_PATTERN is None:
            return self.clock()

        match = self.TIMESTAMP_PATTERN.search(text)
        if not match:
            return self.clock()

        try:
            return datetime(
                self._resolve_year(match.group("year")),
                int(match.group("month")),
                int(match.group("day")),
                int(match.group("hour")),
                int(match.group("minute")),
                tzinfo=self.tz,
            )
        except ValueError:
            # Out-of-range fields ("31/02/25 25:61")
            logger.debug("Unparseable timestamp %r in %s message", match.group(0), self._dialect_code())
            return self.clock()

    def _resolve_year(self, raw: str) -> int:
        """Two-digit years are 2000 + YY."""
        year = int(raw)
        if len(raw) == 2:
            return 2000 + year
        return year

    def _dialect_code(self) -> str | None:
        return self.dialect.value if self.dialect else None
