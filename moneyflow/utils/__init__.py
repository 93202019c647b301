"""Shared helpers for key-case conversion and numeric coercion."""

from moneyflow.utils.coercion import coerce_relation_id, parse_float, parse_int
from moneyflow.utils.string_helpers import to_camel_case

__all__ = [
    "coerce_relation_id",
    "parse_float",
    "parse_int",
    "to_camel_case",
]
