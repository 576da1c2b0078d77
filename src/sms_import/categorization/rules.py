"""Keyword-based category suggestion.

Bank SMS carry no category or MCC. We infer one from the merchant text by
matching it against keyword profiles derived from the user's own category
names, so a "Food & Dining" category picks up "STARBUCKS" and "PHO 24".

This is intentionally rule-based so it's:
- fast (no external calls)
- explainable (the hit keyword is reported)
- deterministic (first candidate in caller order wins)

The suggestion is advisory; the user confirms or overrides it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from sms_import.categorization.keywords import GROUP_KEYWORDS, GROUP_RULES
from sms_import.core.exceptions import CategorizationError
from sms_import.schemas.internal import Category, CategorySuggestion, Direction

logger = logging.getLogger(__name__)

EMPTY_SUGGESTION = CategorySuggestion()


def _norm(name: str | None) -> str:
    """Normalize a category display name (lower-case, single spaces)."""
    return re.sub(r"\s+", " ", (name or "").strip().lower())


def _haystack(*parts: str | None) -> str:
    """Text searched for keywords: lower-cased only, spacing kept as sent."""
    return " ".join(part or "" for part in parts).lower()


def resolve_group(category_name: str | None) -> str | None:
    """Map a category display name to its semantic group.

    Returns:
        Group name, or None when no rule substring occurs in the name
    """
    name = _norm(category_name)
    if not name:
        return None
    for substring, group in GROUP_RULES:
        if substring in name:
            return group
    return None


def keywords_for(category_name: str | None) -> tuple[str, ...]:
    """Keywords for a category name.

    Falls back to the normalized display name itself as the only keyword
    when the name belongs to no known group.
    """
    group = resolve_group(category_name)
    if group is not None:
        return GROUP_KEYWORDS[group]
    name = _norm(category_name)
    return (name,) if name else ()


def _first_hit(text: str, keywords: Sequence[str]) -> str | None:
    for keyword in keywords:
        if keyword and keyword in text:
            return keyword
    return None


def suggest(
    merchant_text: str | None,
    free_description: str | None,
    candidates: Sequence[Category] | None,
) -> CategorySuggestion:
    """Suggest a category for a transaction.

    Args:
        merchant_text: Merchant extracted from the message (optional)
        free_description: Any extra description text (optional)
        candidates: The user's categories, in the caller's preferred order

    Returns:
        Suggestion for the first candidate with a keyword hit, or an empty
        suggestion when nothing matched

    Raises:
        CategorizationError: If candidates is None (contract violation)
    """
    if candidates is None:
        raise CategorizationError(details={"reason": "candidates is None"})

    text = _haystack(merchant_text, free_description)
    if not text.strip() or not candidates:
        return EMPTY_SUGGESTION

    for category in candidates:
        keyword = _first_hit(text, keywords_for(category.name))
        if keyword is not None:
            logger.debug("Category '%s' matched on keyword '%s'", category.name, keyword)
            return CategorySuggestion(
                category_id=category.id,
                category_name=category.name,
                group=resolve_group(category.name),
                keyword=keyword,
            )

    return EMPTY_SUGGESTION


def suggest_name(
    merchant_text: str | None,
    free_description: str | None,
    candidates: Sequence[Category] | None,
) -> str | None:
    """Display name of the suggested category (None when uncategorized)."""
    return suggest(merchant_text, free_description, candidates).category_name


def matches(merchant_text: str | None, category_name: str | None) -> bool:
    """Check if a merchant matches a single category name."""
    text = _haystack(merchant_text)
    if not text.strip():
        return False
    return _first_hit(text, keywords_for(category_name)) is not None


def filter_candidates(
    candidates: Sequence[Category],
    direction: Direction,
) -> list[Category]:
    """Keep categories whose type agrees with the transaction direction.

    Untyped categories are always kept; order is preserved.
    """
    wanted = direction.transaction_type
    return [c for c in candidates if c.type is None or c.type == wanted]
