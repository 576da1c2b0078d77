"""Internal data schemas for parsed SMS data.

These models represent the intermediate structures passed between the
dialect extractors, the category resolver and the caller that owns
transaction creation. None of them is persisted by this library.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sms_import.core.banks import BankDialect, get_bank_display_name


class Direction(str, Enum):
    """Money flow of a transaction, from the account holder's view."""

    DEBIT = "debit"
    CREDIT = "credit"

    @property
    def transaction_type(self) -> str:
        """Ledger type used by the transaction store ('expense' / 'income')."""
        return "expense" if self is Direction.DEBIT else "income"


class RawMessage(BaseModel):
    """A single inbox message as handed over by the SMS reader."""

    model_config = ConfigDict(frozen=True)

    body: str = Field(..., description="Message text (untrusted)")
    sender: str | None = Field(None, description="Sender address or short code")


class ParsedTransaction(BaseModel):
    """Represents a single transaction extracted from a bank SMS.

    Amounts are plain magnitudes in the message currency; the sign lives
    in ``direction``. Contains unmasked data that may include PII
    (``raw_text``).
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., ge=0, description="Non-negative amount")
    direction: Direction = Field(..., description="Debit (expense) or credit (income)")
    merchant_text: str = Field(..., description="Counterparty, or the dialect placeholder")
    occurred_at: datetime = Field(..., description="Transaction time (parse time on fallback)")
    source_dialect: BankDialect = Field(..., description="Dialect that produced this record")
    raw_text: str = Field(..., description="Original message body for audit")
    category_id: str | int | None = Field(None, description="Suggested category id")

    @field_validator("merchant_text")
    @classmethod
    def merchant_not_empty(cls, v: str) -> str:
        """Ensure merchant text is not empty."""
        if not v or not v.strip():
            raise ValueError("Merchant text cannot be empty")
        return v.strip()

    @property
    def transaction_type(self) -> str:
        return self.direction.transaction_type

    @property
    def bank_name(self) -> str:
        return get_bank_display_name(self.source_dialect) or self.source_dialect.value

    def with_category(self, category_id: str | int | None) -> "ParsedTransaction":
        """Return a copy with the suggested category attached."""
        return self.model_copy(update={"category_id": category_id})

    def to_transaction_params(self) -> dict[str, Any]:
        """Build the JSON-safe payload for the external create-transaction operation.

        The amount is a decimal string ("500000") so no precision is lost.
        """
        return {
            "amount": str(self.amount),
            "type": self.transaction_type,
            "description": self.merchant_text,
            "date": self.occurred_at.isoformat(),
            "categoryId": self.category_id,
        }


class Category(BaseModel):
    """A user category as supplied by category management."""

    model_config = ConfigDict(frozen=True)

    id: str | int
    name: str
    type: Literal["income", "expense"] | None = None


class CategorySuggestion(BaseModel):
    """Advisory category pick for a transaction; empty when nothing matched."""

    model_config = ConfigDict(frozen=True)

    category_id: str | int | None = None
    category_name: str | None = None
    group: str | None = Field(None, description="Keyword group that produced the hit")
    keyword: str | None = Field(None, description="Keyword found in the text")

    @property
    def is_empty(self) -> bool:
        return self.category_id is None


class ScanResult(BaseModel):
    """One message of a batch inbox scan and what it parsed to."""

    model_config = ConfigDict(frozen=True)

    message: RawMessage
    transaction: ParsedTransaction | None = None

    @property
    def recognized(self) -> bool:
        return self.transaction is not None
