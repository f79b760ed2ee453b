"""
Category Suggester for transaction notes.
Suggests spending/income categories from free text using whole-word keyword matching.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..config.keyword_loader import validate_keyword_dict
from ..config.suggestion_config import SUGGESTION_CONFIG
from ..patterns.category_keywords import CATEGORY_KEYWORDS
from .pattern_matching import compile_keyword_dict, match_pattern_dict
from .preprocess import combine_description_notes, normalize_text

logger = logging.getLogger(__name__)


@dataclass
class CategoryMatch:
    """Result of categorizing a piece of text."""
    category: str
    confidence: float
    match_method: str  # 'keyword', 'user', 'fallback'
    keyword: Optional[str] = None  # First keyword that triggered the category
    suggestions: List[str] = field(default_factory=list)
    debug_rationale: Optional[str] = None  # Optional debug information


class CategorySuggester:
    """Suggests categories for transaction text."""

    def __init__(
        self,
        keyword_dict: Optional[Mapping[str, Sequence[str]]] = None,
        debug_mode: bool = False
    ):
        """Initialize the suggester and compile the keyword dictionary.

        Args:
            keyword_dict: Category to keyword mapping. Defaults to CATEGORY_KEYWORDS.
            debug_mode: If True, log and record which keyword triggered each match

        Raises:
            KeywordDictionaryError: If the dictionary is malformed
        """
        if keyword_dict is None:
            keyword_dict = CATEGORY_KEYWORDS
        validate_keyword_dict(keyword_dict)

        # Copied and frozen; must stay in step with _compiled
        self.keyword_dict = MappingProxyType(
            {category: tuple(keywords) for category, keywords in keyword_dict.items()}
        )
        self.category_names = tuple(self.keyword_dict)
        self._compiled = compile_keyword_dict(self.keyword_dict)
        self.debug_mode = debug_mode

    def suggest_categories(self, text: Optional[str]) -> List[str]:
        """
        Suggest categories for free text.

        Args:
            text: Any string, e.g. a transaction note

        Returns:
            Category names with at least one whole-word keyword match, in
            dictionary order and without duplicates. Empty when nothing matches.

        Example:
            >>> CategorySuggester().suggest_categories("Almoço no restaurante e depois academia")
            ['alimentação', 'wellness']
        """
        return [category for category, _ in self._scan(normalize_text(text))]

    def match_categories(self, text: Optional[str]) -> List[CategoryMatch]:
        """
        Same scan as suggest_categories(), keeping the keyword behind each category.
        """
        matches = self._scan(normalize_text(text))
        suggestions = [category for category, _ in matches]
        return [
            CategoryMatch(
                category=category,
                confidence=SUGGESTION_CONFIG["confidence"],
                match_method=SUGGESTION_CONFIG["match_method"],
                keyword=keyword,
                suggestions=suggestions,
                debug_rationale=self._build_debug_rationale(category, keyword),
            )
            for category, keyword in matches
        ]

    def suggest_primary_category(self, text: Optional[str]) -> Optional[str]:
        """Return the first suggested category, or None when nothing matches."""
        suggestions = self.suggest_categories(text)
        return suggestions[0] if suggestions else None

    def _scan(self, normalized_text: str) -> List[Tuple[str, str]]:
        matches = match_pattern_dict(normalized_text, self._compiled)
        if self.debug_mode:
            for category, keyword in matches:
                logger.debug("[SUGGEST] %r matched %s via keyword %r", normalized_text, category, keyword)
        return matches

    def _build_debug_rationale(self, category: str, keyword: Optional[str]) -> Optional[str]:
        """Build a rationale string when debug mode is on."""
        if not self.debug_mode:
            return None
        return f"{category}: keyword '{keyword}'"

    def categorize_transaction(
        self,
        description: Optional[str],
        notes: Optional[str] = None,
        category: Optional[str] = None
    ) -> CategoryMatch:
        """
        Categorize a single transaction.

        A category already chosen by the user is kept. Otherwise the first
        suggestion for the description and notes is used, falling back to
        SUGGESTION_CONFIG["fallback_category"].

        Args:
            description: Transaction description
            notes: Optional free-text notes
            category: Optional category chosen by the user

        Returns:
            CategoryMatch with categorization result
        """
        text = combine_description_notes(description, notes)
        matches = self._scan(text)
        suggestions = [name for name, _ in matches]

        if category and category.strip():
            return CategoryMatch(
                category=category.strip(),
                confidence=1.0,
                match_method="user",
                suggestions=suggestions,
            )

        if matches:
            first_category, keyword = matches[0]
            return CategoryMatch(
                category=first_category,
                confidence=SUGGESTION_CONFIG["confidence"],
                match_method=SUGGESTION_CONFIG["match_method"],
                keyword=keyword,
                suggestions=suggestions,
                debug_rationale=self._build_debug_rationale(first_category, keyword),
            )

        return CategoryMatch(
            category=SUGGESTION_CONFIG["fallback_category"],
            confidence=0.0,
            match_method="fallback",
            suggestions=[],
        )

    def categorize_transactions(
        self,
        transactions: List[Dict]
    ) -> List[Tuple[Dict, CategoryMatch]]:
        """
        Categorize a list of transactions.

        Args:
            transactions: List of transaction dictionaries with optional
                'description', 'notes' and 'category' keys

        Returns:
            List of tuples (transaction, category_match)
        """
        results = []

        for txn in transactions:
            category_match = self.categorize_transaction(
                description=_as_text(txn.get("description")),
                notes=_as_text(txn.get("notes")),
                category=_as_text(txn.get("category")),
            )
            results.append((txn, category_match))

        return results

    def get_category_summary(
        self,
        categorized_transactions: List[Tuple[Dict, CategoryMatch]]
    ) -> Dict:
        """
        Generate a summary of categorized transactions.

        Returns:
            Dictionary with per-category totals and counts, counts per match
            method and the number of transactions without any suggestion
        """
        by_category = defaultdict(lambda: {"total": 0.0, "count": 0})
        by_method = defaultdict(int)
        unmatched = 0

        for txn, match in categorized_transactions:
            amount = txn.get("amount", 0) or 0
            try:
                amount = float(amount)
            except (TypeError, ValueError):
                logger.debug("Ignoring non-numeric amount %r in summary", amount)
                amount = 0.0

            by_category[match.category]["total"] += amount
            by_category[match.category]["count"] += 1
            by_method[match.match_method] += 1
            if not match.suggestions:
                unmatched += 1

        return {
            "total_transactions": len(categorized_transactions),
            "by_category": dict(by_category),
            "by_method": dict(by_method),
            "unmatched_count": unmatched,
        }


def _as_text(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and value != value:  # NaN from pandas
        return None
    return str(value)


# Built once at import from the static dictionary, never mutated
_DEFAULT_SUGGESTER = CategorySuggester()


def suggest_categories(text: Optional[str]) -> List[str]:
    """
    Suggest categories for free text using the built-in keyword dictionary.

    Example:
        >>> suggest_categories("Recebi meu salário")
        ['pagamento']
    """
    return _DEFAULT_SUGGESTER.suggest_categories(text)


def get_default_suggester() -> CategorySuggester:
    """Return the shared suggester built from CATEGORY_KEYWORDS."""
    return _DEFAULT_SUGGESTER
