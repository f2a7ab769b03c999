"""
Board Game Engine - Utilities
"""

from .logging_config import setup_logging
from .number_cleaner import (
    NonNumericValue,
    coerce_feature,
    is_numeric_value,
    parse_age,
)

__all__ = [
    'setup_logging',
    'NonNumericValue',
    'coerce_feature',
    'is_numeric_value',
    'parse_age',
]
