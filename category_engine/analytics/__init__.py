"""
Analytics Module for the Category Suggestion Engine.

Builds spending summaries over categorized transactions.
"""

from .summary_builder import (
    TransactionSummaryBuilder,
    SpendingSummary,
    TransactionHighlight,
)

__all__ = [
    "TransactionSummaryBuilder",
    "SpendingSummary",
    "TransactionHighlight",
]
