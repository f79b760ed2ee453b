"""
Whole-word Keyword Matching for Category Suggestions.

Provides reusable pattern compilation and matching for keyword dictionaries.
Keywords are matched literally: regex metacharacters in a keyword ("disney+",
"ingresso.com") are plain text.
"""

import re
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

CompiledKeywords = Tuple[Tuple[str, re.Pattern], ...]


def compile_keyword_pattern(keyword: str) -> re.Pattern:
    """
    Compile a keyword into a whole-word pattern.

    The match must not be preceded or followed by a word character. Word
    characters are Unicode-aware, so "café" does not match inside
    "cafeteria" and "açaí" matches at the end of a sentence.

    Example:
        >>> bool(compile_keyword_pattern("bar").search("fui ao bar"))
        True
        >>> bool(compile_keyword_pattern("bar").search("barulho"))
        False
    """
    return re.compile(r"(?<!\w)" + re.escape(keyword) + r"(?!\w)", re.IGNORECASE)


def compile_keyword_dict(keyword_dict: Mapping[str, Sequence[str]]) -> Dict[str, CompiledKeywords]:
    """
    Precompile every keyword of a category dictionary.

    Args:
        keyword_dict: Mapping of category name to keyword list

    Returns:
        Dictionary of category name to (keyword, pattern) pairs, in the
        same category and keyword order as the input
    """
    return {
        category: tuple((keyword, compile_keyword_pattern(keyword)) for keyword in keywords)
        for category, keywords in keyword_dict.items()
    }


def match_keyword_list(text: str, compiled_keywords: CompiledKeywords) -> Optional[str]:
    """
    Return the first keyword (in list order) found in text, or None.
    """
    for keyword, pattern in compiled_keywords:
        if pattern.search(text):
            return keyword
    return None


def match_pattern_dict(
    text: str,
    compiled_dict: Mapping[str, CompiledKeywords]
) -> List[Tuple[str, str]]:
    """
    Match text against a compiled keyword dictionary.

    Every category is tested independently. Scanning a category stops at its
    first matching keyword.

    Args:
        text: Normalized text to match
        compiled_dict: Output of compile_keyword_dict()

    Returns:
        List of (category_name, matched_keyword) in dictionary order
    """
    matches = []
    if not text:
        return matches

    for category_name, compiled_keywords in compiled_dict.items():
        keyword = match_keyword_list(text, compiled_keywords)
        if keyword is not None:
            matches.append((category_name, keyword))

    return matches
