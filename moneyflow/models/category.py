"""
Category Model.

Income / expense category with its display icon and color.
"""

from __future__ import annotations

from typing import Optional

from moneyflow.models.base import DomainModel, WriteInput
from moneyflow.records.envelopes import RawRecord


class Category(DomainModel):
    """A transaction category; ``name`` falls back to the record's display name."""

    name: Optional[str] = None
    type: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None

    @classmethod
    def from_record(cls, record: RawRecord) -> "Category":
        return cls(
            id=record.get("Id"),
            name=record.get("name_c") or record.get("Name"),
            type=record.get("type_c"),
            icon=record.get("icon_c"),
            color=record.get("color_c"),
        )


class CategoryInput(WriteInput):
    name: Optional[str] = None
    type: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None

    def to_record(self, record_id: Optional[int] = None) -> RawRecord:
        record: RawRecord = {
            "Name": self.name,
            "name_c": self.name,
            "type_c": self.type,
            "icon_c": self.icon,
            "color_c": self.color,
        }
        if record_id is None:
            return record
        return {"Id": record_id, **record}
