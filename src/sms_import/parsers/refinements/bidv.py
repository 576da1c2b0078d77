"""BIDV parser refinement.

Format: "BIDV: TK ****1234 -500,000 VND tai STARBUCKS. SD: 5,234,000 VND"
"""

import re

from sms_import.core.banks import BankDialect
from sms_import.parsers.generic import GenericSmsParser


class BIDVParser(GenericSmsParser):
    """Parser refinement for BIDV notifications.

    BIDV messages carry no transaction time, so ``occurred_at`` is
    always the parse time.
    """

    dialect = BankDialect.BIDV

    FALLBACK_MERCHANT = "BIDV Transaction"

    MERCHANT_PATTERN = re.compile(
        r"\bTai\s+(?!khoan\b)(.+?)\s*\.(?=\s|$)", re.IGNORECASE
    )
    TIMESTAMP_PATTERN = None
