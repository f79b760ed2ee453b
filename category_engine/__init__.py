"""
Category Engine - Transaction Category Suggestions.

Suggests spending and income categories for free-text transaction notes
using a curated dictionary of Portuguese keywords, and summarises
categorized transactions.

Main Components:
    - patterns: Static category keyword dictionary
    - config: Suggestion/summary configuration and keyword loaders
    - categorisation: Whole-word keyword matching and the suggester
    - analytics: Spending summaries over categorized transactions
"""

from typing import Dict, List, Optional

# Core categorisation components
from .categorisation.engine import (
    CategorySuggester,
    CategoryMatch,
    suggest_categories,
    get_default_suggester,
)

# Analytics
from .analytics.summary_builder import (
    TransactionSummaryBuilder,
    SpendingSummary,
    TransactionHighlight,
)

# Configuration
from .config import (
    SUGGESTION_CONFIG,
    SUMMARY_CONFIG,
    KeywordDictionaryError,
    load_keyword_csv,
    merge_keyword_dicts,
    validate_keyword_dict,
)

from .patterns.category_keywords import CATEGORY_KEYWORDS, CATEGORY_NAMES


__version__ = "1.0.0"
__all__ = [
    # Categorisation
    "CategorySuggester",
    "CategoryMatch",
    "suggest_categories",
    "get_default_suggester",
    # Analytics
    "TransactionSummaryBuilder",
    "SpendingSummary",
    "TransactionHighlight",
    # Configuration
    "SUGGESTION_CONFIG",
    "SUMMARY_CONFIG",
    "KeywordDictionaryError",
    "load_keyword_csv",
    "merge_keyword_dicts",
    "validate_keyword_dict",
    # Patterns
    "CATEGORY_KEYWORDS",
    "CATEGORY_NAMES",
    # Main functions
    "build_suggester",
    "categorize_and_summarise",
]


def build_suggester(extra_keywords_csv: Optional[str] = None, debug_mode: bool = False) -> CategorySuggester:
    """
    Build a suggester from the built-in dictionary plus optional CSV keywords.

    Args:
        extra_keywords_csv: Optional path to a 'category,keyword' CSV file
        debug_mode: Passed through to CategorySuggester

    Returns:
        CategorySuggester whose dictionary is fixed for its lifetime
    """
    if not extra_keywords_csv:
        if debug_mode:
            return CategorySuggester(debug_mode=True)
        return get_default_suggester()

    extra = load_keyword_csv(extra_keywords_csv)
    return CategorySuggester(merge_keyword_dicts(CATEGORY_KEYWORDS, extra), debug_mode=debug_mode)


def categorize_and_summarise(
    transactions: List[Dict],
    period: str = "all",
    suggester: Optional[CategorySuggester] = None,
) -> Dict:
    """
    Main entry point for categorizing a list of transactions.

    This function:
    1. Fills in a category for every transaction (user choice, first
       suggestion, or the fallback category)
    2. Builds a spending summary over the categorized transactions

    Args:
        transactions: List of transaction dictionaries with keys:
            - description: Transaction description
            - notes: (Optional) Free-text notes
            - category: (Optional) Category already chosen by the user
            - type: "income" or "expense"
            - amount: Positive transaction amount
            - date: Transaction date (YYYY-MM-DD)
        period: Summary period ('week', 'month', 'year' or 'all')
        suggester: Optional suggester (defaults to the built-in dictionary)

    Returns:
        Dictionary containing:
            - categorized_transactions: transactions with category, suggestions
              and match_method filled in
            - category_summary: counts and totals per category
            - spending_summary: SpendingSummary for the period

    Example:
        >>> result = categorize_and_summarise([
        ...     {"description": "Aluguel", "type": "expense", "amount": 1500, "date": "2025-10-05"},
        ... ])
        >>> result["categorized_transactions"][0]["category"]
        'moradia'
    """
    suggester = suggester or get_default_suggester()
    categorized = suggester.categorize_transactions(transactions)

    categorized_list = []
    for txn, category_match in categorized:
        categorized_txn = dict(txn)
        categorized_txn.update({
            "category": category_match.category,
            "suggestions": category_match.suggestions,
            "match_method": category_match.match_method,
            "matched_keyword": category_match.keyword,
            "confidence": category_match.confidence,
        })
        categorized_list.append(categorized_txn)

    summary = TransactionSummaryBuilder().build_summary(categorized_list, period=period)

    return {
        "categorized_transactions": categorized_list,
        "category_summary": suggester.get_category_summary(categorized),
        "spending_summary": summary,
    }
