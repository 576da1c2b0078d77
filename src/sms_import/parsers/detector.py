"""Bank dialect detection from SMS content.

This module identifies which bank produced a notification message
based on brand names and sender ids found in the sender + body text.
"""

import re

from sms_import.core.banks import BankDialect


class DialectDetector:
    """Detects the issuing bank dialect of an SMS notification.

    The detector upper-cases ``sender + " " + body`` and looks for each
    dialect's recognition markers in a fixed priority order. The first
    dialect with any marker present wins; there is no scoring.

    Sender-only markers (numeric short codes) are tested against the
    sender id alone, since a bare number in a message body is meaningless.

    When no marker matches at all, a second tier of layout signatures is
    consulted. These describe a dialect's fixed message shape rather than
    its brand, so they run strictly after every brand marker.

    Supported dialects (priority order):
        - vietcombank: Vietcombank (VCB)
        - techcombank: Techcombank (TCB)
        - vpbank: VPBank
        - acb: Asia Commercial Bank
        - bidv: BIDV

    Example:
        >>> detector = DialectDetector()
        >>> detector.detect("TCB: GD -500,000d Tai: STARBUCKS*", None)
        <BankDialect.TECHCOMBANK: 'techcombank'>
    """

    # Brand / sender substrings, matched against upper-cased content
    DIALECT_MARKERS: dict[BankDialect, tuple[str, ...]] = {
        BankDialect.VIETCOMBANK: ("VIETCOMBANK", "VCB"),
        BankDialect.TECHCOMBANK: ("TECHCOMBANK", "TCB", "TCB-EBANK"),
        BankDialect.VPBANK: ("VPBANK", "VPBANKHN"),
        BankDialect.ACB: ("ACB", "ACB-BANK"),
        BankDialect.BIDV: ("BIDV",),
    }

    # Substrings matched against the sender id only
    SENDER_MARKERS: dict[BankDialect, tuple[str, ...]] = {
        BankDialect.VIETCOMBANK: ("9254",),
    }

    # Message shapes, consulted only when no marker matched
    LAYOUT_SIGNATURES: dict[BankDialect, tuple[str, ...]] = {
        # "TK ...1234 -150,000 VND": three-dot account mask (BIDV uses ****)
        BankDialect.VIETCOMBANK: (r"\bTK\s+\.{3}\d{3,}",),
    }

    def __init__(self):
        """Initialize the detector with its own copy of the marker tables."""
        self._markers: dict[BankDialect, list[str]] = {
            dialect: list(markers) for dialect, markers in self.DIALECT_MARKERS.items()
        }
        self._sender_markers: dict[BankDialect, list[str]] = {
            dialect: list(markers) for dialect, markers in self.SENDER_MARKERS.items()
        }
        self._signatures: dict[BankDialect, list[re.Pattern]] = {
            dialect: [re.compile(pattern, re.IGNORECASE) for pattern in patterns]
            for dialect, patterns in self.LAYOUT_SIGNATURES.items()
        }

    def detect(self, body: str | None, sender: str | None = None) -> BankDialect | None:
        """Detect the dialect of a message.

        Args:
            body: Message text
            sender: Optional sender id

        Returns:
            BankDialect or None if no marker or signature matched
        """
        if not body or not body.strip():
            return None

        content = f"{sender or ''} {body}".upper()
        sender_upper = (sender or "").upper()

        for dialect in self._markers:
            if self._has_marker(content, self._markers[dialect]):
                return dialect
            if sender_upper and self._has_marker(
                sender_upper, self._sender_markers.get(dialect, [])
            ):
                return dialect

        for dialect, patterns in self._signatures.items():
            if any(pattern.search(body) for pattern in patterns):
                return dialect

        return None

    def _has_marker(self, content: str, markers: list[str]) -> bool:
        return any(marker in content for marker in markers)

    def get_supported_dialects(self) -> list[BankDialect]:
        """Get dialects in detection priority order."""
        return list(self._markers.keys())

    def add_marker(self, dialect: BankDialect, marker: str) -> None:
        """Add a new recognition marker for a dialect.

        New dialects are appended to the end of the priority order.

        Args:
            dialect: Dialect the marker identifies
            marker: Substring to look for (case-insensitive)
        """
        self._markers.setdefault(dialect, []).append(marker.upper())
