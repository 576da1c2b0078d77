import sys
from datetime import datetime
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parents[1] / "src"))

from sms_import.config import Settings
from sms_import.core.banks import BankDialect
from sms_import.parsers.factory import build_parser_factory
from sms_import.schemas.internal import Category

FIXED_NOW = datetime(2025, 6, 1, 12, 0)


# Canonical notification per dialect
VIETCOMBANK_SMS = "TK ...1234 -500,000 VND 21/11/25 14:30. Tai STARBUCKS. SD: 5,234,000 VND"
TECHCOMBANK_SMS = "TCB: GD -500,000d Tai: STARBUCKS* Luc 14:30 21/11/25"
VPBANK_SMS = "VPBank: -500,000 VND Tu TK 12345678 Den STARBUCKS 21/11/2025 14:30"
ACB_SMS = "ACB: Tai khoan ****1234 tru 500,000 VND Tai STARBUCKS Ngay 21/11/25 14:30"
BIDV_SMS = "BIDV: TK ****1234 -500,000 VND tai STARBUCKS. SD: 5,234,000 VND"


@pytest.fixture
def canonical_sms() -> dict[BankDialect, str]:
    """One well-formed notification per dialect."""
    return {
        BankDialect.VIETCOMBANK: VIETCOMBANK_SMS,
        BankDialect.TECHCOMBANK: TECHCOMBANK_SMS,
        BankDialect.VPBANK: VPBANK_SMS,
        BankDialect.ACB: ACB_SMS,
        BankDialect.BIDV: BIDV_SMS,
    }


@pytest.fixture
def fixed_clock():
    """Clock for the timestamp fallback path."""
    return lambda: FIXED_NOW


@pytest.fixture
def factory(fixed_clock):
    """Parser factory with every dialect registered and a fixed clock."""
    return build_parser_factory(clock=fixed_clock)


@pytest.fixture
def default_categories() -> list[Category]:
    """Default category set of a new user (expense first, then income)."""
    return [
        Category(id="c-food", name="Food & Dining", type="expense"),
        Category(id="c-transport", name="Transportation", type="expense"),
        Category(id="c-shopping", name="Shopping", type="expense"),
        Category(id="c-entertainment", name="Entertainment", type="expense"),
        Category(id="c-bills", name="Bills & Utilities", type="expense"),
        Category(id="c-health", name="Healthcare", type="expense"),
        Category(id="c-education", name="Education", type="expense"),
        Category(id="c-salary", name="Salary", type="income"),
        Category(id="c-freelance", name="Freelance", type="income"),
        Category(id="c-investment", name="Investment", type="income"),
        Category(id="c-gift", name="Gift", type="income"),
    ]


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, scan_workers=2)
