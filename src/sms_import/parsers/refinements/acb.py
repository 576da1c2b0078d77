"""ACB parser refinement.

Format: "ACB: Tai khoan ****1234 tru 500,000 VND Tai STARBUCKS Ngay 21/11/25 14:30"
"""

import re

from sms_import.core.banks import BankDialect
from sms_import.parsers.generic import AMOUNT_TOKEN, GenericSmsParser
from sms_import.schemas.internal import Direction


class ACBParser(GenericSmsParser):
    """Parser refinement for ACB notifications.

    ACB-specific behaviors:
    - Direction is a verb, not a sign: "tru" (debited) / "cong" (credited)
    - "Tai khoan" (account) precedes the merchant's "Tai" and must be skipped
    - Timestamp follows "Ngay": DD/MM/YY HH:MM
    """

    dialect = BankDialect.ACB

    FALLBACK_MERCHANT = "ACB Transaction"

    AMOUNT_PATTERN = re.compile(
        r"\b(?P<verb>tru|cong)\s+" + AMOUNT_TOKEN + r"\s*VND", re.IGNORECASE
    )
    MERCHANT_PATTERN = re.compile(
        r"\bTai\s+(?!khoan\b)(.+?)(?:\s+Ngay\b|$)", re.IGNORECASE | re.MULTILINE
    )
    TIMESTAMP_PATTERN = re.compile(
        r"\bNgay\s+(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{2})\s+(?P<hour>\d{2}):(?P<minute>\d{2})",
        re.IGNORECASE,
    )

    def _direction_from(self, match: re.Match, text: str) -> Direction:
        return Direction.DEBIT if match.group("verb").lower() == "tru" else Direction.CREDIT
