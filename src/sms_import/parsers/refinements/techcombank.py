"""Techcombank parser refinement.

Format: "TCB: GD -500,000d Tai: STARBUCKS* Luc 14:30 21/11/25"
"""

import re

from sms_import.core.banks import BankDialect
from sms_import.parsers.generic import AMOUNT_TOKEN, GenericSmsParser


class TechcombankParser(GenericSmsParser):
    """Parser refinement for Techcombank (TCB) notifications.

    Techcombank-specific behaviors:
    - Amount follows "GD" (giao dich) and is suffixed with "d" / "đ"
    - Merchant follows "Tai:" and runs until "Luc"; card terminals append "*"
    - Timestamp order is reversed: "Luc HH:MM DD/MM/YY"
    """

    dialect = BankDialect.TECHCOMBANK

    FALLBACK_MERCHANT = "Techcombank Transaction"

    AMOUNT_PATTERN = re.compile(
        r"\bGD\s+(?P<sign>[-+]?)" + AMOUNT_TOKEN + r"\s*[dđ]", re.IGNORECASE
    )
    MERCHANT_PATTERN = re.compile(
        r"\bTai:\s*(.+?)(?:\s+Luc\b|$)", re.IGNORECASE | re.MULTILINE
    )
    TIMESTAMP_PATTERN = re.compile(
        r"\bLuc\s+(?P<hour>\d{2}):(?P<minute>\d{2})\s+(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{2})",
        re.IGNORECASE,
    )

    def _clean_merchant(self, raw: str) -> str:
        """Drop the terminal marker ("STARBUCKS*" -> "STARBUCKS")."""
        return super()._clean_merchant((raw or "").replace("*", ""))
