"""
Category Keyword Definitions for the Category Suggestion Engine.

Contains the static keyword dictionary used to suggest categories for
free-text transaction notes:
- Food and groceries (alimentação)
- Transport (transporte)
- Housing and utilities (moradia)
- Incoming payments (pagamento)
- Leisure and subscriptions (lazer)
- Health (saúde)
- Fitness (wellness)
- Education (educação)
"""

from .category_keywords import CATEGORY_KEYWORDS, CATEGORY_NAMES

__all__ = [
    "CATEGORY_KEYWORDS",
    "CATEGORY_NAMES",
]
