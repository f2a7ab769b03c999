"""
Number Cleaner Utilities
========================

Numeric coercion for game record fields.

Functions:
    - coerce_feature: Convert a raw field to float, 0.0 for missing values
    - is_numeric_value: Check if a raw field coerces to a number
    - parse_age: Normalize a raw minimum age for filter matching
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

import numpy as np

# Plain decimal literals: "12", "-3.5", ".5", "1e3"
NUMERIC_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


class NonNumericValue(ValueError):
    """Raised when a raw field cannot be read as a finite number."""
    pass


def coerce_feature(value: Any) -> float:
    """
    Convert a raw record field to float.

    Rules:
        - None -> 0.0
        - bool -> 0.0 / 1.0
        - finite int / float (numpy included) -> float
        - str: stripped; empty -> 0.0; decimal literal -> value
        - anything else (placeholders like "N/A", NaN, inf,
          lists, mappings) -> NonNumericValue

    Args:
        value: The raw value

    Returns:
        Float value

    Raises:
        NonNumericValue: If the value is not numeric

    Examples:
        >>> coerce_feature(None)
        0.0
        >>> coerce_feature(" 45 ")
        45.0
    """
    if value is None:
        return 0.0

    if isinstance(value, (bool, np.bool_)):
        return float(bool(value))

    if isinstance(value, (int, float, np.integer, np.floating)):
        result = float(value)
        if not math.isfinite(result):
            raise NonNumericValue(f"Non-finite value: {value!r}")
        return result

    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return 0.0
        if not NUMERIC_PATTERN.match(cleaned):
            raise NonNumericValue(f"Not a number: {value!r}")
        result = float(cleaned)
        if not math.isfinite(result):
            raise NonNumericValue(f"Non-finite value: {value!r}")
        return result

    raise NonNumericValue(f"Unsupported type {type(value).__name__}: {value!r}")


def is_numeric_value(value: Any) -> bool:
    """Check if a value can be coerced by coerce_feature."""
    try:
        coerce_feature(value)
    except NonNumericValue:
        return False
    return True


def parse_age(value: Any) -> Optional[Union[int, float]]:
    """
    Normalize a raw minimum age.

    Finite numbers and numeric strings stay numbers: int when integral,
    float otherwise. Missing or unreadable values become None, which only
    matches a filter that explicitly selects None.

    Examples:
        >>> parse_age("8")
        8
        >>> parse_age(10.0)
        10
        >>> parse_age(8.5)
        8.5
        >>> parse_age("N/A") is None
        True
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return None

    if isinstance(value, str) and not value.strip():
        return None

    try:
        number = coerce_feature(value)
    except NonNumericValue:
        return None

    if number.is_integer():
        return int(number)
    return number
