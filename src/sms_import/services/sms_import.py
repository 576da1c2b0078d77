"""SMS import service.

This module orchestrates the complete import workflow for one message:
1. Detect dialect and parse the message
2. Narrow the user's categories to the transaction's direction
3. Suggest a category from the merchant text
4. Hand the draft transaction to the caller's create operation

Persistence, duplicate detection and user confirmation belong to the
caller; the suggestion attached here is advisory.
"""

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol

from sms_import.categorization.rules import filter_candidates, suggest
from sms_import.config import Settings, settings as default_settings
from sms_import.core.logger import filter_pii
from sms_import.parsers.factory import SmsParserFactory, get_parser_factory
from sms_import.schemas.internal import Category, ParsedTransaction, RawMessage, ScanResult

logger = logging.getLogger(__name__)


class TransactionCreator(Protocol):
    """The caller's "create transaction" operation."""

    def __call__(self, params: dict[str, Any]) -> Any: ...


class SmsImportService:
    """Service for turning inbox messages into draft transactions.

    Parsing and suggestion are pure, so one service instance can be shared
    across threads.
    """

    def __init__(
        self,
        factory: SmsParserFactory | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the service.

        Args:
            factory: Parser factory (default: the global factory)
            settings: Library settings (default: the module settings)
        """
        self.factory = factory or get_parser_factory()
        self.settings = settings or default_settings

    def prepare(
        self,
        message: RawMessage,
        categories: Sequence[Category],
    ) -> ParsedTransaction | None:
        """Parse a message and attach a suggested category.

        Args:
            message: Inbox message
            categories: The user's categories in display order

        Returns:
            ParsedTransaction with ``category_id`` set when a category
            matched, or None for messages that cannot be imported
        """
        transaction = self.factory.parse(message.body, message.sender)
        if transaction is None:
            return None

        candidates = filter_candidates(categories, transaction.direction)
        free_description = message.body if self.settings.suggest_from_body else None
        suggestion = suggest(transaction.merchant_text, free_description, candidates)

        if suggestion.is_empty:
            logger.debug("No category suggestion for merchant '%s'", transaction.merchant_text)
            return transaction

        return transaction.with_category(suggestion.category_id)

    def import_message(
        self,
        message: RawMessage,
        categories: Sequence[Category],
        create: TransactionCreator,
    ) -> Any | None:
        """Prepare a message and pass it to the create operation.

        Returns:
            Whatever ``create`` returns, or None if the message was not
            recognized (``create`` is not called then)
        """
        transaction = self.prepare(message, categories)
        if transaction is None:
            logger.info("Skipped unrecognized message: %s", filter_pii(message.body))
            return None

        params = transaction.to_transaction_params()
        params["currency"] = self.settings.currency
        params["bank"] = transaction.bank_name
        return create(params)

    def scan_inbox(
        self,
        messages: Iterable[RawMessage],
        categories: Sequence[Category],
    ) -> list[ScanResult]:
        """Re-scan a batch of messages on a worker pool.

        Results are returned in input order.
        """
        batch = list(messages)
        if not batch:
            return []

        workers = min(self.settings.scan_workers, len(batch))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            transactions = list(pool.map(lambda m: self.prepare(m, categories), batch))

        results = [
            ScanResult(message=message, transaction=transaction)
            for message, transaction in zip(batch, transactions)
        ]
        recognized = sum(1 for result in results if result.recognized)
        logger.info("Scanned %d messages: %d recognized", len(results), recognized)
        return results
