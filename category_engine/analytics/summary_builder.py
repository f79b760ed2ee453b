"""
Spending Summary Builder for categorized transactions.
Calculates income/expense totals, spending by category and transaction highlights.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple
import logging

import pandas as pd

from ..config.suggestion_config import SUMMARY_CONFIG

# Initialize logger for this module
logger = logging.getLogger(__name__)


@dataclass
class TransactionHighlight:
    """A single notable transaction (largest income or expense)."""
    description: str = SUMMARY_CONFIG["empty_label"]
    amount: float = 0.0
    date: str = ""


@dataclass
class SpendingSummary:
    """Aggregated view of a set of transactions."""
    period: str = "all"
    transaction_count: int = 0

    # Totals for the selected period
    total_income: float = 0.0
    total_expense: float = 0.0
    balance: float = 0.0
    savings_rate: float = 0.0  # balance / income * 100

    # Computed over all transactions, sorted by amount (descending)
    expenses_by_category: Dict[str, float] = field(default_factory=dict)
    top_expense_category: str = SUMMARY_CONFIG["empty_label"]
    top_expense_amount: float = 0.0

    largest_expense: TransactionHighlight = field(default_factory=TransactionHighlight)
    largest_income: TransactionHighlight = field(default_factory=TransactionHighlight)

    most_active_day: str = SUMMARY_CONFIG["empty_label"]
    most_active_day_count: int = 0

    def top_expense_categories(self, limit: Optional[int] = None) -> List[Tuple[str, float]]:
        """Return the highest spending categories, largest first."""
        if limit is None:
            limit = SUMMARY_CONFIG["top_categories_limit"]
        return list(self.expenses_by_category.items())[:limit]


class TransactionSummaryBuilder:
    """Builds spending summaries from transaction dictionaries."""

    def __init__(self, reference_date: Optional[date] = None):
        """
        Args:
            reference_date: Date that "this week/month/year" is relative to.
                Defaults to today.
        """
        self.reference_date = reference_date or date.today()

    def build_summary(self, transactions: List[Dict], period: str = "all") -> SpendingSummary:
        """
        Build a spending summary.

        Totals use only transactions inside the period. Category breakdown,
        highlights and the most active weekday use every transaction.

        Args:
            transactions: Dicts with 'type', 'amount', 'category', 'date'
                and 'description' keys
            period: One of 'week', 'month', 'year', 'all'

        Returns:
            SpendingSummary

        Raises:
            ValueError: If period is not recognised
        """
        if period not in SUMMARY_CONFIG["periods"]:
            raise ValueError(
                f"Unknown period {period!r}; expected one of {', '.join(SUMMARY_CONFIG['periods'])}"
            )

        summary = SpendingSummary(period=period)
        if not transactions:
            return summary

        df = self._to_frame(transactions)
        summary.transaction_count = len(df)

        period_df = self._filter_period(df, period)
        income = float(period_df.loc[period_df["type"] == SUMMARY_CONFIG["income_type"], "amount"].sum())
        expense = float(period_df.loc[period_df["type"] == SUMMARY_CONFIG["expense_type"], "amount"].sum())
        summary.total_income = income
        summary.total_expense = expense
        summary.balance = income - expense
        summary.savings_rate = (summary.balance / income * 100) if income > 0 else 0.0

        expenses = df[df["type"] == SUMMARY_CONFIG["expense_type"]]
        incomes = df[df["type"] == SUMMARY_CONFIG["income_type"]]

        if not expenses.empty:
            by_category = (
                expenses.groupby("category", sort=False)["amount"].sum()
                .sort_values(ascending=False, kind="mergesort")
            )
            summary.expenses_by_category = {str(k): float(v) for k, v in by_category.items()}
            summary.top_expense_category, summary.top_expense_amount = next(
                iter(summary.expenses_by_category.items())
            )
            summary.largest_expense = self._highlight(expenses)

        if not incomes.empty:
            summary.largest_income = self._highlight(incomes)

        # Shift Monday == 0 to Sunday == 0
        weekdays = (df["parsed_date"].dropna().dt.weekday + 1) % 7
        if not weekdays.empty:
            counts = weekdays.value_counts().sort_index()
            day = int(counts.idxmax())
            summary.most_active_day = SUMMARY_CONFIG["weekday_names"][day]
            summary.most_active_day_count = int(counts.max())

        logger.debug(
            "[SUMMARY] period=%s txns=%d income=%.2f expense=%.2f",
            period, summary.transaction_count, income, expense
        )
        return summary

    def _to_frame(self, transactions: List[Dict]) -> pd.DataFrame:
        df = pd.DataFrame(transactions)
        for column in ("type", "category", "description", "date"):
            if column not in df.columns:
                df[column] = ""
        if "amount" not in df.columns:
            df["amount"] = 0.0

        df["type"] = df["type"].fillna("").astype(str).str.strip().str.lower()
        df["category"] = df["category"].fillna("").astype(str)
        df["description"] = df["description"].fillna("").astype(str)
        df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0)
        df["parsed_date"] = pd.to_datetime(
            df["date"], format=SUMMARY_CONFIG["date_format"], errors="coerce"
        )
        return df

    def _filter_period(self, df: pd.DataFrame, period: str) -> pd.DataFrame:
        if period == "all":
            return df

        dates = df["parsed_date"]
        ref = pd.Timestamp(self.reference_date)

        if period == "week":
            mask = dates >= ref - timedelta(days=SUMMARY_CONFIG["week_days"])
        elif period == "month":
            mask = (dates.dt.month == ref.month) & (dates.dt.year == ref.year)
        else:
            mask = dates.dt.year == ref.year

        return df[mask.fillna(False).astype(bool)]

    def _highlight(self, rows: pd.DataFrame) -> TransactionHighlight:
        # idxmax keeps the first of equal amounts
        row = rows.loc[rows["amount"].idxmax()]
        parsed = row["parsed_date"]
        return TransactionHighlight(
            description=row["description"],
            amount=float(row["amount"]),
            date="" if pd.isna(parsed) else parsed.strftime("%d/%m/%Y"),
        )
