"""Transaction categorization utilities.

This module suggests a user category for a parsed transaction based on
keyword profiles. It is intentionally rule-based (no network calls) to keep
imports fast and privacy-safe.
"""

from .rules import filter_candidates, keywords_for, matches, resolve_group, suggest, suggest_name

__all__ = [
    "suggest",
    "suggest_name",
    "matches",
    "keywords_for",
    "resolve_group",
    "filter_candidates",
]
