"""Утилиты для генератора"""

from .naming import is_identifier, quote_literal, to_identifier
from .url import is_valid_url

__all__ = [
    "is_identifier",
    "quote_literal",
    "to_identifier",
    "is_valid_url",
]
