"""
Configuration for category suggestions and spending summaries.
"""

# Suggestion Configuration
SUGGESTION_CONFIG = {
    # Category assigned by batch categorization when nothing matches
    "fallback_category": "outros",

    # Keyword matches are exact (whole-word), so confidence is fixed
    "confidence": 1.0,
    "match_method": "keyword",

    # Maximum suggestions returned by the dashboard (None = no limit)
    "max_suggestions": None,
}

# Spending Summary Configuration
SUMMARY_CONFIG = {
    "date_format": "%Y-%m-%d",
    "top_categories_limit": 5,
    "periods": ("week", "month", "year", "all"),
    "week_days": 7,

    # Transaction "type" values
    "income_type": "income",
    "expense_type": "expense",

    # Placeholder used when there is no expense/income to report
    "empty_label": "N/A",

    # Sunday == 0; ties for most active day go to the earliest in this order
    "weekday_names": (
        "Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado",
    ),
}
