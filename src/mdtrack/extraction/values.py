"""Numeric value parsing for extracted evidence."""

import math
import re
from typing import Any

from mdtrack.core.exceptions import UnparseableValueError

# Longest leading decimal literal: "72.5kg" -> "72.5", "-3" -> "-3"
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(raw: Any) -> float:
    """Parse a scalar as a float using its leading numeric literal.

    Ints and floats pass through. Strings are read up to the first character
    that cannot continue a decimal literal, so units are tolerated.

    Raises:
        UnparseableValueError: For booleans, non-scalars, and text without a
            leading number.
    """
    if isinstance(raw, bool):
        raise UnparseableValueError(raw)
    if isinstance(raw, (int, float)):
        value = float(raw)
        if math.isnan(value):
            raise UnparseableValueError(raw)
        return value
    if isinstance(raw, str):
        match = _LEADING_NUMBER.match(raw)
        if match:
            return float(match.group(1))
    raise UnparseableValueError(raw)


def select_segment(raw: Any, sub_index: int) -> Any:
    """Pick one element of a multi-value field.

    Strings are split on ``/``; lists are indexed directly.

    Raises:
        UnparseableValueError: If the value has no element at sub_index.
    """
    if isinstance(raw, str):
        segments: list[Any] = [s.strip() for s in raw.split("/")]
    elif isinstance(raw, list):
        segments = raw
    else:
        raise UnparseableValueError(raw)

    if sub_index < 0 or sub_index >= len(segments):
        raise UnparseableValueError(raw)
    return segments[sub_index]
