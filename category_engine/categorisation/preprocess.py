"""
Preprocessing utilities for category suggestions.
Handles text normalisation and combining transaction text fields.
"""

from typing import Optional


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize text for matching.

    Only lowercases. Accents are significant and whitespace is kept as-is,
    so "saúde" and "saude" stay distinct keywords.

    Args:
        text: Raw text to normalize

    Returns:
        Normalized lowercase text
    """
    if not text:
        return ""
    return text.lower()


def combine_description_notes(description: Optional[str], notes: Optional[str]) -> str:
    """
    Combine a transaction description and its free-text notes for matching.

    Args:
        description: Transaction description
        notes: Optional free-text notes typed by the user

    Returns:
        Single normalized string containing both fields
    """
    parts = [normalize_text(description), normalize_text(notes)]
    return " ".join(part for part in parts if part)
