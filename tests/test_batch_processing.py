"""
Test suite for batch processing of transaction files.

Tests cover:
- JSON (list and object) and CSV files
- Per-file error accounting without aborting the batch
- Encoding fallbacks
- Batch statistics
"""

import json
import os
import tempfile
import unittest

from category_engine import CategorySuggester
from transaction_batch_processor import (
    BatchResult,
    TransactionBatchProcessor,
    process_paths,
)


def _json_bytes(data) -> bytes:
    return json.dumps(data, ensure_ascii=False).encode("utf-8")


class TestJsonFiles(unittest.TestCase):
    """Test JSON transaction files."""

    def setUp(self):
        self.processor = TransactionBatchProcessor()

    def test_list_of_transactions(self):
        content = _json_bytes([
            {"description": "Farmácia", "amount": 80, "date": "2025-10-01"},
            {"description": "Uber para o cinema", "amount": 30, "date": "2025-10-02"},
        ])
        result = self.processor.process_batch([("october.json", content)])

        self.assertIsInstance(result, BatchResult)
        self.assertEqual(result.stats.successful, 1)
        self.assertEqual(result.errors, [])

        rows = result.results[0].transactions
        self.assertEqual(result.results[0].file_name, "october.json")
        self.assertEqual([row["category"] for row in rows], ["saúde", "transporte"])
        self.assertEqual(rows[1]["suggestions"], ["transporte", "lazer"])
        self.assertEqual(rows[0]["matched_keyword"], "farmácia")

    def test_object_with_transactions_key(self):
        content = _json_bytes({"transactions": [{"description": "Aluguel", "amount": 1500}]})
        result = self.processor.process_batch([("rent.json", content)])
        self.assertEqual(result.results[0].transactions[0]["category"], "moradia")
        self.assertEqual(result.results[0].category_summary["by_category"]["moradia"]["count"], 1)

    def test_invalid_json(self):
        result = self.processor.process_batch([("broken.json", b"{not json")])
        self.assertEqual(result.stats.failed, 1)
        self.assertEqual(result.errors[0].error_type, "JSON_PARSE_ERROR")
        self.assertEqual(result.error_summary, {"JSON_PARSE_ERROR": 1})

    def test_object_without_transactions(self):
        result = self.processor.process_batch([("odd.json", _json_bytes({"items": []}))])
        self.assertEqual(result.errors[0].error_type, "INVALID_FILE_STRUCTURE")

    def test_non_object_transaction(self):
        result = self.processor.process_batch([("odd.json", _json_bytes(["Aluguel"]))])
        self.assertEqual(result.errors[0].error_type, "INVALID_FILE_STRUCTURE")

    def test_empty_transaction_list(self):
        result = self.processor.process_batch([("empty.json", b"[]")])
        self.assertEqual(result.errors[0].error_type, "DATA_VALIDATION_ERROR")
        self.assertIn("No transactions", result.errors[0].error_message)

    def test_cp1252_encoded_file(self):
        content = '[{"description": "Farmácia"}]'.encode("cp1252")
        result = self.processor.process_batch([("legacy.json", content)])
        self.assertEqual(result.results[0].transactions[0]["category"], "saúde")


class TestCsvFiles(unittest.TestCase):
    """Test CSV transaction files."""

    def setUp(self):
        self.processor = TransactionBatchProcessor()

    def test_csv_file(self):
        content = "Description,Notes,Amount\nFarmácia,,50.5\nPix,xyz,10\n".encode("utf-8")
        result = self.processor.process_batch([("export.csv", content)])

        rows = result.results[0].transactions
        self.assertEqual([row["category"] for row in rows], ["saúde", "outros"])
        self.assertEqual(rows[0]["amount"], 50.5)
        self.assertEqual(result.stats.suggested, 1)
        self.assertEqual(result.stats.unmatched, 1)
        self.assertEqual(result.stats.suggestion_rate, 50.0)

    def test_csv_with_bom(self):
        content = "description,amount\nAcademia,99\n".encode("utf-8-sig")
        result = self.processor.process_batch([("bom.csv", content)])
        self.assertEqual(result.results[0].transactions[0]["category"], "wellness")

    def test_csv_user_category_kept(self):
        content = "description,category\nSupermercado,Casa\nSupermercado,\n".encode("utf-8")
        result = self.processor.process_batch([("export.csv", content)])
        rows = result.results[0].transactions
        self.assertEqual([row["category"] for row in rows], ["Casa", "alimentação"])
        self.assertEqual([row["match_method"] for row in rows], ["user", "keyword"])

    def test_csv_without_text_columns(self):
        content = b"date,amount\n2025-10-01,10\n"
        result = self.processor.process_batch([("numbers.csv", content)])
        self.assertEqual(result.errors[0].error_type, "INVALID_FILE_STRUCTURE")

    def test_empty_csv(self):
        result = self.processor.process_batch([("empty.csv", b"")])
        self.assertEqual(result.errors[0].error_type, "DATA_VALIDATION_ERROR")


class TestBatchAccounting(unittest.TestCase):
    """Test statistics and error summaries across files."""

    def test_mixed_batch_continues_after_errors(self):
        processor = TransactionBatchProcessor()
        progress = []
        result = processor.process_batch(
            [
                ("good.json", _json_bytes([{"description": "Pizza"}])),
                ("bad.json", b"[oops"),
                ("notes.txt", b"Pizza"),
                ("good.csv", "description\nGasolina\n".encode("utf-8")),
            ],
            progress_callback=lambda current, total, message: progress.append((current, total)),
        )

        self.assertEqual(result.stats.total_files, 4)
        self.assertEqual(result.stats.processed, 4)
        self.assertEqual(result.stats.successful, 2)
        self.assertEqual(result.stats.failed, 2)
        self.assertEqual(result.stats.success_rate, 50.0)
        self.assertEqual(result.stats.total_transactions, 2)
        self.assertEqual(result.error_summary, {"JSON_PARSE_ERROR": 1, "UNSUPPORTED_FILE_TYPE": 1})
        self.assertEqual(progress, [(1, 4), (2, 4), (3, 4), (4, 4)])
        self.assertGreaterEqual(result.stats.processing_time, 0.0)

    def test_empty_batch(self):
        result = TransactionBatchProcessor().process_batch([])
        self.assertEqual(result.stats.total_files, 0)
        self.assertEqual(result.stats.success_rate, 0.0)
        self.assertEqual(result.stats.suggestion_rate, 0.0)

    def test_custom_suggester(self):
        processor = TransactionBatchProcessor(suggester=CategorySuggester({"pets": ["ração"]}))
        result = processor.process_batch([("pets.json", _json_bytes([{"description": "Ração"}]))])
        self.assertEqual(result.results[0].transactions[0]["category"], "pets")

    def test_process_paths(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "october.json")
            with open(path, "wb") as f:
                f.write(_json_bytes([{"description": "Netflix"}]))
            result = process_paths([path])

        self.assertEqual(result.results[0].file_name, "october.json")
        self.assertEqual(result.results[0].transactions[0]["category"], "lazer")


if __name__ == "__main__":
    unittest.main()
