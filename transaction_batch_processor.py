"""
Transaction Batch Processor for categorizing exported transaction files.
Handles JSON and CSV files with per-file error handling.
"""

import io
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple
import traceback

import pandas as pd

from category_engine.categorisation.engine import CategorySuggester, get_default_suggester

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".json", ".csv"}


class InvalidFileStructureError(Exception):
    """Raised when a file cannot be normalized to a list of transactions."""
    pass


class UnsupportedFileTypeError(Exception):
    """Raised for files that are neither JSON nor CSV."""
    pass


@dataclass
class ProcessingError:
    """Details of a processing error."""
    file_name: str
    error_type: str
    error_message: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class BatchStats:
    """Statistics for batch processing."""
    total_files: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0

    # Transaction counts
    total_transactions: int = 0
    suggested: int = 0  # At least one category suggested
    unmatched: int = 0

    # Timing
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def processing_time(self) -> float:
        """Calculate total processing time in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return 0.0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_files == 0:
            return 0.0
        return (self.successful / self.total_files) * 100

    @property
    def suggestion_rate(self) -> float:
        """Percentage of transactions that received at least one suggestion."""
        if self.total_transactions == 0:
            return 0.0
        return (self.suggested / self.total_transactions) * 100


@dataclass
class FileResult:
    """Categorized transactions from one file."""
    file_name: str
    transactions: List[Dict]
    category_summary: Dict


@dataclass
class BatchResult:
    """Complete result of batch processing."""
    stats: BatchStats
    results: List[FileResult]
    errors: List[ProcessingError]
    error_summary: Dict[str, int] = field(default_factory=dict)


class TransactionBatchProcessor:
    """Batch processor for transaction export files."""

    def __init__(self, suggester: Optional[CategorySuggester] = None):
        """
        Initialize the batch processor.

        Args:
            suggester: Suggester to use. Defaults to the built-in dictionary.
        """
        self.suggester = suggester or get_default_suggester()
        logger.info(
            f"Initialized batch processor with {len(self.suggester.category_names)} categories"
        )

    def process_batch(
        self,
        files: List[Tuple[str, bytes]],
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Process a batch of transaction files.

        Args:
            files: List of (filename, content) tuples
            progress_callback: Optional callback(current, total, message)

        Returns:
            BatchResult with all processing results
        """
        stats = BatchStats(
            total_files=len(files),
            start_time=datetime.now()
        )

        results = []
        errors = []
        error_types: Dict[str, int] = {}

        def record_error(filename: str, error_type: str, message: str) -> None:
            errors.append(ProcessingError(
                file_name=filename,
                error_type=error_type,
                error_message=message
            ))
            stats.failed += 1
            stats.processed += 1
            error_types[error_type] = error_types.get(error_type, 0) + 1

        logger.info(f"Starting batch processing of {len(files)} files")

        for idx, (filename, content) in enumerate(files):
            try:
                if progress_callback:
                    progress_callback(idx + 1, len(files), f"Processing: {filename}")

                logger.debug(f"Processing file {idx + 1}/{len(files)}: {filename}")

                result = self._process_single_file(filename, content)

                results.append(result)
                stats.processed += 1
                stats.successful += 1
                stats.total_transactions += len(result.transactions)
                for txn in result.transactions:
                    if txn["suggestions"]:
                        stats.suggested += 1
                    else:
                        stats.unmatched += 1

            except json.JSONDecodeError as e:
                record_error(filename, "JSON_PARSE_ERROR", f"Invalid JSON: {str(e)}")
                logger.error(f"JSON parse error in {filename}: {e}")

            except UnsupportedFileTypeError as e:
                record_error(filename, "UNSUPPORTED_FILE_TYPE", str(e))
                logger.error(f"Unsupported file type {filename}: {e}")

            except InvalidFileStructureError as e:
                record_error(filename, "INVALID_FILE_STRUCTURE", str(e))
                logger.error(f"Invalid file structure in {filename}: {e}")

            except ValueError as e:
                record_error(filename, "DATA_VALIDATION_ERROR", str(e))
                logger.error(f"Data validation error in {filename}: {e}")

            except Exception as e:
                record_error(filename, "PROCESSING_ERROR", f"{type(e).__name__}: {str(e)}")
                logger.error(f"Processing error in {filename}: {traceback.format_exc()}")

        stats.end_time = datetime.now()

        logger.info(
            f"Batch processing complete: {stats.successful}/{stats.total_files} successful, "
            f"{stats.suggested}/{stats.total_transactions} transactions with suggestions, "
            f"time: {stats.processing_time:.1f}s"
        )

        return BatchResult(
            stats=stats,
            results=results,
            errors=errors,
            error_summary=error_types
        )

    def _process_single_file(self, filename: str, content: bytes) -> FileResult:
        """Process a single transaction file."""
        suffix = Path(filename).suffix.lower()
        if suffix not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileTypeError(
                f"Unsupported file type '{suffix or filename}'. Expected JSON or CSV."
            )

        text = self._decode(content)
        if suffix == ".json":
            transactions = self._normalize_json_structure(json.loads(text), filename)
        else:
            transactions = self._read_csv(text, filename)

        if not transactions:
            raise ValueError("No transactions found in file")

        categorized = self.suggester.categorize_transactions(transactions)

        rows = []
        for txn, category_match in categorized:
            row = dict(txn)
            row.update({
                "category": category_match.category,
                "suggestions": category_match.suggestions,
                "match_method": category_match.match_method,
                "matched_keyword": category_match.keyword,
                "confidence": category_match.confidence,
            })
            rows.append(row)

        return FileResult(
            file_name=filename,
            transactions=rows,
            category_summary=self.suggester.get_category_summary(categorized),
        )

    @staticmethod
    def _decode(content: bytes) -> str:
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError:
            # Fallback to cp1252 for Windows-encoded exports
            try:
                return content.decode("cp1252")
            except UnicodeDecodeError:
                # Final fallback to latin-1 which accepts all byte values
                return content.decode("latin-1")

    def _normalize_json_structure(self, data, filename: str) -> List[Dict]:
        """
        Normalize JSON data to a list of transaction dictionaries.

        Handles:
        - Root-level list of transactions
        - Dictionary with a 'transactions' key

        Raises:
            InvalidFileStructureError: If structure cannot be normalized
        """
        if isinstance(data, dict):
            if "transactions" not in data:
                raise InvalidFileStructureError(
                    "Invalid JSON format. Expected array or object with 'transactions' key"
                )
            data = data["transactions"]

        if not isinstance(data, list):
            raise InvalidFileStructureError(
                f"Expected a list of transactions, got {type(data).__name__}"
            )

        non_dicts = [idx for idx, txn in enumerate(data) if not isinstance(txn, dict)]
        if non_dicts:
            raise InvalidFileStructureError(
                f"Transaction {non_dicts[0]} is not an object"
            )

        logger.debug(f"{filename}: {len(data)} transactions in JSON")
        return data

    def _read_csv(self, text: str, filename: str) -> List[Dict]:
        try:
            df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            return []

        df.columns = [str(col).strip().lower() for col in df.columns]
        if "description" not in df.columns and "notes" not in df.columns:
            raise InvalidFileStructureError(
                "CSV must contain a 'description' or 'notes' column"
            )

        if "amount" in df.columns:
            df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0)

        logger.debug(f"{filename}: {len(df)} transactions in CSV")
        return df.to_dict(orient="records")


def process_paths(paths: List[str], processor: Optional[TransactionBatchProcessor] = None) -> BatchResult:
    """
    Read files from disk and process them as one batch.

    Args:
        paths: File paths to read
        processor: Optional processor (a default one is created otherwise)

    Returns:
        BatchResult
    """
    processor = processor or TransactionBatchProcessor()
    files = [(Path(path).name, Path(path).read_bytes()) for path in paths]
    return processor.process_batch(files)
