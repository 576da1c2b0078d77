"""VPBank parser refinement.

Format: "VPBank: -500,000 VND Tu TK 12345678 Den STARBUCKS 21/11/2025 14:30"
"""

import re

from sms_import.core.banks import BankDialect
from sms_import.parsers.generic import GenericSmsParser
from sms_import.schemas.internal import Direction


class VPBankParser(GenericSmsParser):
    """Parser refinement for VPBank notifications.

    VPBank-specific behaviors:
    - Outgoing transfers say "Tu TK" (from account) even without a sign
    - Merchant follows "Den" (to) and ends before the date
    - Timestamp uses a four-digit year: DD/MM/YYYY HH:MM
    """

    dialect = BankDialect.VPBANK

    FALLBACK_MERCHANT = "VPBank Transaction"

    MERCHANT_PATTERN = re.compile(
        r"\bDen\s+(.+?)(?:\s+\d{2}/\d{2}/|$)", re.IGNORECASE | re.MULTILINE
    )
    TIMESTAMP_PATTERN = re.compile(
        r"(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{4})\s+(?P<hour>\d{2}):(?P<minute>\d{2})"
    )

    OUTGOING_PHRASE = re.compile(r"\btu\s+tk\b", re.IGNORECASE)

    def _direction_from(self, match: re.Match, text: str) -> Direction:
        if match.group("sign") == "-" or self.OUTGOING_PHRASE.search(text):
            return Direction.DEBIT
        return Direction.CREDIT
