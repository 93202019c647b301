"""
Numeric Coercion Helpers.

The UI submits form values as strings (``"12.50"``, ``"80"``, ``"7"``).
These helpers parse them the way browser form code does: the longest
numeric prefix wins, surrounding whitespace is ignored, and anything
without a numeric prefix is rejected.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Union

from moneyflow.records.errors import MappingError

NumericInput = Union[str, int, float, None]

_RE_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_RE_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(value: NumericInput) -> Optional[int]:
    """Parse the leading integer of *value*; ``None`` when there is none.

    ``"42"`` -> 42, ``"42abc"`` -> 42, ``"7.9"`` -> 7, ``"abc"`` -> None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _RE_INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else None


def parse_float(value: NumericInput, field: str) -> float:
    """Parse the leading decimal number of *value*.

    Raises:
        MappingError: If *value* has no numeric prefix.
    """
    if isinstance(value, bool):
        raise MappingError(field, value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise MappingError(field, value)
        return float(value)
    match = _RE_FLOAT_PREFIX.match(str(value)) if value is not None else None
    if match is None:
        raise MappingError(field, value)
    return float(match.group(1))


def coerce_relation_id(value: NumericInput) -> Optional[int]:
    """Parse a related record id; unparsable or zero ids mean "no relation"."""
    parsed = parse_int(value)
    return parsed or None
