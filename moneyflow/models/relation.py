"""
Relation Field Decoding.

The record service returns a relation column either as the bare related
identifier (``7``) or, when the relation was expanded, as an object
carrying the related record's display name (``{"Id": 7, "Name": "Food"}``).
Both shapes are decoded once at the boundary into a tagged union and
resolved to the domain value by :func:`resolve_relation`.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field, JsonValue


class ScalarRelation(BaseModel):
    """Relation returned as a bare value (usually the related ``Id``)."""

    value: Union[int, float, str]

    model_config = {"frozen": True}


class ExpandedRelation(BaseModel):
    """Relation returned as the related record itself."""

    id: Optional[int] = Field(default=None, alias="Id")
    name: Optional[str] = Field(default=None, alias="Name")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


Relation = Union[ScalarRelation, ExpandedRelation]


def decode_relation(raw: JsonValue) -> Optional[Relation]:
    """Decode a raw relation column; ``None`` when the record has no relation."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, dict):
        return ExpandedRelation.model_validate(raw)
    if isinstance(raw, (int, float, str)) and not isinstance(raw, bool):
        return ScalarRelation(value=raw)
    raise ValueError(f"Unsupported relation value: {raw!r}")


def resolve_relation(relation: Optional[Relation]) -> Optional[Union[int, float, str]]:
    """Return the related display name, or the scalar value as-is."""
    if relation is None:
        return None
    if isinstance(relation, ExpandedRelation):
        return relation.name or relation.id
    return relation.value
