"""Unit tests for SmsImportService."""

import logging
from datetime import datetime
from decimal import Decimal
from unittest.mock import Mock

import pytest

from sms_import.config import Settings
from sms_import.core.banks import BankDialect
from sms_import.parsers.factory import get_parser_factory
from sms_import.schemas.internal import Direction, RawMessage
from sms_import.services.sms_import import SmsImportService

SALARY_SMS = "TCB: GD +15,000,000d Tai: CONG TY ABC LUONG T11 Luc 09:00 30/11/25"
OTP_SMS = "Your OTP is 123456 for TK 12345678"


@pytest.fixture
def service(factory, test_settings):
    """Service wired to the fixed-clock factory."""
    return SmsImportService(factory=factory, settings=test_settings)


@pytest.fixture
def mock_create():
    """Stand-in for the caller's create-transaction operation."""
    return Mock(return_value="txn-1")


class TestPrepare:
    """Test suite for SmsImportService.prepare."""

    def test_prepare_expense(self, service, canonical_sms, default_categories):
        """Test a debit message gets an expense category."""
        msg = RawMessage(body=canonical_sms[BankDialect.VIETCOMBANK])

        txn = service.prepare(msg, default_categories)

        assert txn.amount == Decimal("500000")
        assert txn.direction == Direction.DEBIT
        assert txn.category_id == "c-food"

    def test_prepare_income(self, service, default_categories):
        """Test a credit message only considers income categories."""
        txn = service.prepare(RawMessage(body=SALARY_SMS), default_categories)

        assert txn.direction == Direction.CREDIT
        assert txn.category_id == "c-salary"

    def test_prepare_no_category_match(self, service, default_categories):
        """Test an unmatched merchant leaves the category empty."""
        msg = RawMessage(body="BIDV: TK ****1234 -50,000 VND tai XYZ123. SD: 1,000 VND")

        txn = service.prepare(msg, default_categories)

        assert txn is not None
        assert txn.category_id is None

    def test_prepare_unrecognized(self, service, default_categories):
        """Test non-bank messages are not prepared."""
        assert service.prepare(RawMessage(body=OTP_SMS), default_categories) is None

    def test_prepare_uses_sender(self, service, default_categories):
        """Test the sender id takes part in dialect detection."""
        msg = RawMessage(body="GD -75,000d Tai: HIGHLANDS* Luc 08:00 02/12/25", sender="Techcombank")

        txn = service.prepare(msg, default_categories)

        assert txn.source_dialect == BankDialect.TECHCOMBANK
        assert txn.category_id == "c-food"

    def test_body_ignored_for_suggestion_by_default(self, service, default_categories):
        """Test only the merchant text feeds the resolver by default."""
        msg = RawMessage(body="BIDV: TK ****1234 -50,000 VND thanh toan KFC. SD: 1,000 VND")

        txn = service.prepare(msg, default_categories)

        assert txn.merchant_text == "BIDV Transaction"
        assert txn.category_id is None

    def test_body_used_for_suggestion_when_enabled(self, factory, default_categories):
        """Test suggest_from_body passes the body as free description."""
        settings = Settings(_env_file=None, suggest_from_body=True)
        service = SmsImportService(factory=factory, settings=settings)
        msg = RawMessage(body="BIDV: TK ****1234 -50,000 VND thanh toan KFC. SD: 1,000 VND")

        txn = service.prepare(msg, default_categories)

        assert txn.category_id == "c-food"

    def test_default_collaborators(self):
        """Test the service falls back to the global factory."""
        service = SmsImportService()

        assert service.factory is get_parser_factory()
        assert isinstance(service.settings, Settings)


class TestImportMessage:
    """Test suite for SmsImportService.import_message."""

    def test_import_calls_create(self, service, canonical_sms, default_categories, mock_create):
        """Test the create operation receives the transaction payload."""
        msg = RawMessage(body=canonical_sms[BankDialect.VIETCOMBANK])

        result = service.import_message(msg, default_categories, mock_create)

        assert result == "txn-1"
        mock_create.assert_called_once_with(
            {
                "amount": "500000",
                "type": "expense",
                "description": "STARBUCKS",
                "date": datetime(2025, 11, 21, 14, 30).isoformat(),
                "categoryId": "c-food",
                "currency": "VND",
                "bank": "Vietcombank",
            }
        )

    def test_import_unrecognized_skips_create(self, service, default_categories, mock_create):
        """Test create is not called for unrecognized messages."""
        result = service.import_message(RawMessage(body=OTP_SMS), default_categories, mock_create)

        assert result is None
        mock_create.assert_not_called()

    def test_import_logs_without_pii(self, service, default_categories, mock_create, caplog):
        """Test skipped messages are logged with account numbers masked."""
        with caplog.at_level(logging.INFO, logger="sms_import.services.sms_import"):
            service.import_message(RawMessage(body=OTP_SMS), default_categories, mock_create)

        assert "Skipped unrecognized message" in caplog.text
        assert "12345678" not in caplog.text
        assert "[ACCOUNT]" in caplog.text

    def test_import_propagates_create_errors(self, service, canonical_sms, default_categories):
        """Test failures of the create operation reach the caller."""
        create = Mock(side_effect=RuntimeError("store unavailable"))
        msg = RawMessage(body=canonical_sms[BankDialect.ACB])

        with pytest.raises(RuntimeError, match="store unavailable"):
            service.import_message(msg, default_categories, create)


class TestScanInbox:
    """Test suite for SmsImportService.scan_inbox."""

    def test_scan_preserves_order(self, service, canonical_sms, default_categories):
        """Test results come back in input order."""
        messages = [
            RawMessage(body=canonical_sms[BankDialect.VIETCOMBANK]),
            RawMessage(body=OTP_SMS),
            RawMessage(body=SALARY_SMS),
            RawMessage(body=canonical_sms[BankDialect.BIDV]),
        ]

        results = service.scan_inbox(messages, default_categories)

        assert [r.message for r in results] == messages
        assert [r.recognized for r in results] == [True, False, True, True]
        assert results[2].transaction.category_id == "c-salary"

    def test_scan_matches_sequential_prepare(self, service, canonical_sms, default_categories):
        """Test the worker pool gives the same records as prepare."""
        messages = [RawMessage(body=body) for body in canonical_sms.values()]

        results = service.scan_inbox(messages, default_categories)

        assert [r.transaction for r in results] == [
            service.prepare(m, default_categories) for m in messages
        ]

    def test_scan_empty(self, service, default_categories):
        """Test an empty inbox scans to nothing."""
        assert service.scan_inbox([], default_categories) == []

    def test_scan_accepts_generator(self, service, canonical_sms, default_categories):
        """Test any iterable of messages is accepted."""
        messages = (RawMessage(body=body) for body in canonical_sms.values())

        results = service.scan_inbox(messages, default_categories)

        assert len(results) == 5
        assert all(r.recognized for r in results)
