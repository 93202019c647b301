"""
Transaction Model.

A single income or expense entry.  Unlike the other entities the
transaction's ``name`` is stored directly in the display-name column.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from moneyflow.models.base import DomainModel, NumericInput, RelationValue, WriteInput
from moneyflow.models.relation import decode_relation, resolve_relation
from moneyflow.records.envelopes import RawRecord
from moneyflow.utils.coercion import coerce_relation_id, parse_float


class Transaction(DomainModel):
    name: str = ""
    type: Optional[str] = None
    amount: Optional[float] = None
    date: Optional[str] = None
    description: str = ""
    category: RelationValue = None

    @classmethod
    def from_record(cls, record: RawRecord) -> "Transaction":
        return cls(
            id=record.get("Id"),
            name=record.get("Name") or "",
            type=record.get("type_c"),
            amount=record.get("amount_c"),
            date=record.get("date_c"),
            description=record.get("description_c") or "",
            category=resolve_relation(decode_relation(record.get("category_c"))),
        )


class TransactionInput(WriteInput):
    """Create / update payload for a transaction.

    ``category_c`` is the category id; updates omit it unless it was given.
    """

    name: Optional[str] = None
    type: Optional[str] = None
    amount: NumericInput = None
    date: Optional[str] = None
    description: Optional[str] = None
    category_c: RelationValue = Field(default=None, alias="category_c")

    def display_name(self) -> str:
        return self.name or self.description or f"{self.type} - {self.amount}"

    def to_record(self, record_id: Optional[int] = None) -> RawRecord:
        record: RawRecord = {
            "Name": self.display_name(),
            "type_c": self.type,
            "amount_c": parse_float(self.amount, "amount"),
            "date_c": self.date,
            "description_c": self.description or "",
        }
        if record_id is None or "category_c" in self.model_fields_set:
            record["category_c"] = coerce_relation_id(self.category_c)
        if record_id is None:
            return record
        return {"Id": record_id, **record}
