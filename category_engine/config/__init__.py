"""
Configuration module for the Category Suggestion Engine.

This module contains the configuration dictionaries and keyword dictionary loaders.
"""

from .suggestion_config import SUGGESTION_CONFIG, SUMMARY_CONFIG
from .keyword_loader import (
    KeywordDictionaryError,
    validate_keyword_dict,
    load_keyword_csv,
    merge_keyword_dicts,
)

__all__ = [
    "SUGGESTION_CONFIG",
    "SUMMARY_CONFIG",
    "KeywordDictionaryError",
    "validate_keyword_dict",
    "load_keyword_csv",
    "merge_keyword_dicts",
]
