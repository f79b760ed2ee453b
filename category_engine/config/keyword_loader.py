"""
Keyword dictionary loading and validation.
Loads optional extra keywords from CSV and checks dictionaries are well formed.
"""

import csv
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple


class KeywordDictionaryError(ValueError):
    """Raised when a keyword dictionary is malformed."""
    pass


def validate_keyword_dict(keyword_dict: Mapping[str, Sequence[str]]) -> None:
    """
    Check a keyword dictionary is well formed.

    Rules:
        - at least one category
        - category names are non-blank strings
        - every category has at least one keyword
        - keywords are non-blank, lowercase and carry no surrounding whitespace

    Raises:
        KeywordDictionaryError: describing the first problem found
    """
    if not keyword_dict:
        raise KeywordDictionaryError("Keyword dictionary is empty")

    for category, keywords in keyword_dict.items():
        if not isinstance(category, str) or not category.strip():
            raise KeywordDictionaryError(f"Invalid category name: {category!r}")
        if isinstance(keywords, str):
            raise KeywordDictionaryError(
                f"Keywords for {category!r} must be a sequence of strings, not a string"
            )
        if not keywords:
            raise KeywordDictionaryError(f"Category {category!r} has no keywords")

        for keyword in keywords:
            if not isinstance(keyword, str) or not keyword.strip():
                raise KeywordDictionaryError(f"Blank keyword in category {category!r}")
            if keyword != keyword.strip():
                raise KeywordDictionaryError(
                    f"Keyword {keyword!r} in {category!r} has surrounding whitespace"
                )
            if keyword != keyword.lower():
                raise KeywordDictionaryError(
                    f"Keyword {keyword!r} in {category!r} is not lowercase"
                )


def load_keyword_csv(csv_path: str) -> Dict[str, List[str]]:
    """
    Load extra category keywords from a CSV file.

    Args:
        csv_path: Path to CSV file with 'category' and 'keyword' columns

    Returns:
        Dictionary mapping category names to keyword lists, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        KeywordDictionaryError: If the header lacks a 'category' or 'keyword' column

    Example CSV format:
        category,keyword
        alimentação,hamburgueria
        transporte,buser
    """
    mapping: Dict[str, List[str]] = {}

    csv_file = Path(csv_path)
    if not csv_file.exists():
        raise FileNotFoundError(f"Keyword file not found: {csv_path}")

    # utf-8-sig strips the BOM spreadsheet exports put before the header
    with open(csv_file, 'r', encoding='utf-8-sig', newline='') as f:
        reader = csv.DictReader(f)
        missing = [name for name in ('category', 'keyword') if name not in (reader.fieldnames or [])]
        if missing:
            raise KeywordDictionaryError(
                f"Keyword file {csv_path} is missing column(s): {', '.join(missing)}"
            )
        for row in reader:
            category = (row.get('category') or '').strip()
            keyword = (row.get('keyword') or '').strip().lower()
            if category and keyword:
                keywords = mapping.setdefault(category, [])
                if keyword not in keywords:
                    keywords.append(keyword)

    return mapping


def merge_keyword_dicts(
    base: Mapping[str, Sequence[str]],
    extra: Mapping[str, Sequence[str]]
) -> Mapping[str, Tuple[str, ...]]:
    """
    Merge extra keywords into a base dictionary.

    Base categories keep their position and keyword order; extra keywords are
    appended to existing categories and new categories go after the base ones.

    Returns:
        Read-only mapping of category name to keyword tuple
    """
    merged: Dict[str, List[str]] = {category: list(keywords) for category, keywords in base.items()}

    for category, keywords in extra.items():
        target = merged.setdefault(category, [])
        for keyword in keywords:
            if keyword not in target:
                target.append(keyword)

    return MappingProxyType({category: tuple(keywords) for category, keywords in merged.items()})
