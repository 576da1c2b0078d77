"""Bank dialect identifiers and display metadata."""

from __future__ import annotations

from enum import Enum
from typing import Final


class BankDialect(str, Enum):
    """Recognized SMS notification formats, one per issuing bank."""

    VIETCOMBANK = "vietcombank"
    TECHCOMBANK = "techcombank"
    VPBANK = "vpbank"
    ACB = "acb"
    BIDV = "bidv"


BANK_DISPLAY_NAMES: Final[dict[BankDialect, str]] = {
    BankDialect.VIETCOMBANK: "Vietcombank",
    BankDialect.TECHCOMBANK: "Techcombank",
    BankDialect.VPBANK: "VPBank",
    BankDialect.ACB: "ACB",
    BankDialect.BIDV: "BIDV",
}


def get_bank_display_name(dialect: BankDialect | str | None) -> str | None:
    if not dialect:
        return None
    if isinstance(dialect, BankDialect):
        return BANK_DISPLAY_NAMES[dialect]
    try:
        return BANK_DISPLAY_NAMES[BankDialect(dialect.strip().lower())]
    except ValueError:
        return None
