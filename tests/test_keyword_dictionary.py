"""
Test suite for the category keyword dictionary and its validation.

Tests cover:
- Category order and dictionary structure
- Keyword well-formedness (non-empty, lowercase, trimmed, unique per category)
- Read-only dictionary
- Validation errors raised when building a suggester from a bad dictionary
"""

import unittest

from category_engine import (
    CATEGORY_KEYWORDS,
    CATEGORY_NAMES,
    CategorySuggester,
    KeywordDictionaryError,
    validate_keyword_dict,
)
from category_engine.categorisation.pattern_matching import compile_keyword_pattern


class TestDictionaryStructure(unittest.TestCase):
    """Test the built-in dictionary is well formed."""

    def test_category_order(self):
        self.assertEqual(
            CATEGORY_NAMES,
            ("alimentação", "transporte", "moradia", "pagamento",
             "lazer", "saúde", "wellness", "educação")
        )
        self.assertEqual(tuple(CATEGORY_KEYWORDS), CATEGORY_NAMES)

    def test_every_category_has_keywords(self):
        self.assertTrue(CATEGORY_KEYWORDS)
        for category, keywords in CATEGORY_KEYWORDS.items():
            self.assertGreater(len(keywords), 0, category)

    def test_keywords_are_lowercase_and_trimmed(self):
        for category, keywords in CATEGORY_KEYWORDS.items():
            for keyword in keywords:
                self.assertTrue(keyword.strip(), category)
                self.assertEqual(keyword, keyword.strip(), keyword)
                self.assertEqual(keyword, keyword.lower(), keyword)

    def test_no_repeated_keywords_within_a_category(self):
        for category, keywords in CATEGORY_KEYWORDS.items():
            self.assertEqual(len(keywords), len(set(keywords)), category)

    def test_every_keyword_compiles_and_matches_itself(self):
        for keywords in CATEGORY_KEYWORDS.values():
            for keyword in keywords:
                self.assertIsNotNone(compile_keyword_pattern(keyword).search(keyword), keyword)

    def test_builtin_dictionary_passes_validation(self):
        validate_keyword_dict(CATEGORY_KEYWORDS)

    def test_dictionary_is_read_only(self):
        with self.assertRaises(TypeError):
            CATEGORY_KEYWORDS["pets"] = ("ração",)
        self.assertIsInstance(CATEGORY_KEYWORDS["moradia"], tuple)

    def test_known_keywords_present(self):
        self.assertIn("salário", CATEGORY_KEYWORDS["pagamento"])
        self.assertIn("plano de saúde", CATEGORY_KEYWORDS["saúde"])
        self.assertIn("fast food", CATEGORY_KEYWORDS["alimentação"])
        self.assertIn("disney+", CATEGORY_KEYWORDS["lazer"])

    def test_overlapping_entries_are_kept(self):
        # Both entries exist so "café" and "cafeteria" each match on their own.
        self.assertIn("café", CATEGORY_KEYWORDS["alimentação"])
        self.assertIn("cafeteria", CATEGORY_KEYWORDS["alimentação"])


class TestDictionaryValidation(unittest.TestCase):
    """Test malformed dictionaries are rejected at construction."""

    def assertInvalid(self, keyword_dict):
        with self.assertRaises(KeywordDictionaryError):
            validate_keyword_dict(keyword_dict)
        with self.assertRaises(KeywordDictionaryError):
            CategorySuggester(keyword_dict)

    def test_empty_dictionary(self):
        self.assertInvalid({})

    def test_category_without_keywords(self):
        self.assertInvalid({"pets": []})

    def test_blank_category_name(self):
        self.assertInvalid({"  ": ["ração"]})

    def test_blank_keyword(self):
        self.assertInvalid({"pets": ["ração", " "]})

    def test_uppercase_keyword(self):
        self.assertInvalid({"pets": ["Petshop"]})

    def test_keyword_with_surrounding_whitespace(self):
        self.assertInvalid({"pets": [" petshop"]})

    def test_keywords_given_as_single_string(self):
        self.assertInvalid({"pets": "petshop"})

    def test_error_is_a_value_error(self):
        self.assertTrue(issubclass(KeywordDictionaryError, ValueError))

    def test_custom_dictionary_accepted(self):
        suggester = CategorySuggester({"pets": ["ração", "pet shop"], "viagem": ["hotel"]})
        self.assertEqual(suggester.category_names, ("pets", "viagem"))
        self.assertEqual(suggester.suggest_categories("Hotel e ração"), ["pets", "viagem"])


if __name__ == "__main__":
    unittest.main()
