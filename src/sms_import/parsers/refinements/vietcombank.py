"""Vietcombank parser refinement.

Format: "TK ...1234 -500,000 VND 21/11/25 14:30. Tai STARBUCKS. SD: 5,234,000 VND"
"""

import re

from sms_import.core.banks import BankDialect
from sms_import.parsers.generic import AMOUNT_TOKEN, GenericSmsParser


class VietcombankParser(GenericSmsParser):
    """Parser refinement for Vietcombank (VCB) notifications.

    Vietcombank-specific behaviors:
    - Amount is signed and suffixed with "VND" or "d"
    - Merchant follows "Tai" and ends at the next sentence period
    - Timestamp is DD/MM/YY HH:MM right after the amount
    """

    dialect = BankDialect.VIETCOMBANK

    FALLBACK_MERCHANT = "Vietcombank Transaction"

    AMOUNT_PATTERN = re.compile(
        r"(?P<sign>[-+]?)" + AMOUNT_TOKEN + r"\s*(?:VND|d)", re.IGNORECASE
    )
    MERCHANT_PATTERN = re.compile(
        r"\bTai\s+(?!khoan\b)(.+?)\s*\.(?=\s|$)", re.IGNORECASE
    )
    TIMESTAMP_PATTERN = re.compile(
        r"(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{2})\s+(?P<hour>\d{2}):(?P<minute>\d{2})"
    )
