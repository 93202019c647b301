"""
Budget Model.

Monthly spending limit for one category, with alert settings.

Storage columns: ``monthly_limit_c``, ``spent_c``, ``month_c``,
``alert_threshold_c``, ``alert_methods_c`` (comma-joined string) and the
``category_c`` relation.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import Field, JsonValue

from moneyflow.models.base import DomainModel, NumericInput, RelationValue, WriteInput
from moneyflow.models.relation import decode_relation, resolve_relation
from moneyflow.records.envelopes import RawRecord
from moneyflow.utils.coercion import coerce_relation_id, parse_float, parse_int

DEFAULT_ALERT_THRESHOLD: int = 80
DEFAULT_ALERT_METHODS: tuple[str, ...] = ("email", "push")
ALERT_METHOD_SEPARATOR: str = ","


def split_alert_methods(raw: JsonValue) -> list[str]:
    """Decode the stored alert methods, defaulting to email + push."""
    if isinstance(raw, list):
        methods = [str(item).strip() for item in raw]
    elif isinstance(raw, str) and raw:
        methods = [item.strip() for item in raw.split(ALERT_METHOD_SEPARATOR)]
    else:
        return list(DEFAULT_ALERT_METHODS)
    return [method for method in methods if method]


def join_alert_methods(methods: Union[list[str], str, None]) -> Optional[str]:
    if isinstance(methods, list):
        return ALERT_METHOD_SEPARATOR.join(methods)
    return methods


class Budget(DomainModel):
    """A category budget for one month."""

    monthly_limit: Optional[float] = None
    spent: float = 0
    month: Optional[str] = None
    alert_threshold: int = DEFAULT_ALERT_THRESHOLD
    alert_methods: list[str] = Field(default_factory=lambda: list(DEFAULT_ALERT_METHODS))
    category: RelationValue = None

    @classmethod
    def from_record(cls, record: RawRecord) -> "Budget":
        return cls(
            id=record.get("Id"),
            monthly_limit=record.get("monthly_limit_c"),
            spent=record.get("spent_c") or 0,
            month=record.get("month_c"),
            alert_threshold=record.get("alert_threshold_c") or DEFAULT_ALERT_THRESHOLD,
            alert_methods=split_alert_methods(record.get("alert_methods_c")),
            category=resolve_relation(decode_relation(record.get("category_c"))),
        )


class BudgetInput(WriteInput):
    """Create / update payload for a budget.

    ``category`` is the category display name used to build the record
    name; ``category_c`` is the related category id.  An update that does
    not set ``category_c`` leaves the stored relation untouched.
    """

    name: Optional[str] = None
    monthly_limit: NumericInput = None
    spent: NumericInput = None
    month: Optional[str] = None
    alert_threshold: NumericInput = None
    alert_methods: Union[list[str], str, None] = None
    category: RelationValue = None
    category_c: RelationValue = Field(default=None, alias="category_c")

    def display_name(self) -> str:
        if self.name:
            return self.name
        if self.category:
            return f"{self.category} Budget - {self.month}"
        return f"Budget - {self.month}"

    def to_record(self, record_id: Optional[int] = None) -> RawRecord:
        record: RawRecord = {
            "monthly_limit_c": parse_float(self.monthly_limit, "monthlyLimit"),
            "spent_c": parse_float(self.spent or 0, "spent"),
            "month_c": self.month,
            "alert_threshold_c": parse_int(self.alert_threshold or DEFAULT_ALERT_THRESHOLD),
            "alert_methods_c": join_alert_methods(self.alert_methods),
        }
        # Domain objects only carry the resolved category; keep the stored id.
        if record_id is None or "category_c" in self.model_fields_set:
            record["category_c"] = coerce_relation_id(self.category_c)
        if record_id is None:
            return {"Name": self.display_name(), **record}
        return {"Id": record_id, **record}
