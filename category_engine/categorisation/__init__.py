"""
Categorisation Module for the Category Suggestion Engine.

Suggests categories for transaction text through:
- Preprocessing (lowercasing, combining description and notes)
- Pattern matching (precompiled whole-word keyword patterns)
"""

from .engine import (
    CategorySuggester,
    CategoryMatch,
    suggest_categories,
    get_default_suggester,
)
from .preprocess import normalize_text, combine_description_notes
from .pattern_matching import (
    compile_keyword_pattern,
    compile_keyword_dict,
    match_keyword_list,
    match_pattern_dict,
)

__all__ = [
    # Main suggester
    "CategorySuggester",
    "CategoryMatch",
    "suggest_categories",
    "get_default_suggester",
    # Preprocessing utilities
    "normalize_text",
    "combine_description_notes",
    # Pattern matching utilities
    "compile_keyword_pattern",
    "compile_keyword_dict",
    "match_keyword_list",
    "match_pattern_dict",
]
