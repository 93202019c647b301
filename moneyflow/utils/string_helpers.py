"""
String Helpers: Naming Convention Converter.

Domain objects are exposed in camelCase (``monthlyLimit``) while Python
attributes stay snake_case (``monthly_limit``).  All key conversion for the
domain models flows through :func:`to_camel_case`, which is installed as the
Pydantic ``alias_generator``.
"""

from __future__ import annotations

__all__ = [
    "to_camel_case",
]


def to_camel_case(name: str) -> str:
    """Convert a snake_case string to lower camelCase.

    ::

        monthly_limit   -> monthlyLimit
        alert_methods   -> alertMethods
        name            -> name
    """
    head, *tail = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in tail)
