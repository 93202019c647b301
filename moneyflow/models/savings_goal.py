"""
SavingsGoal Model.

Target amount to reach by a deadline, with the amount saved so far.
"""

from __future__ import annotations

from typing import Optional

from moneyflow.models.base import DomainModel, NumericInput, WriteInput
from moneyflow.records.envelopes import RawRecord
from moneyflow.utils.coercion import parse_float


class SavingsGoal(DomainModel):
    name: Optional[str] = None
    target_amount: Optional[float] = None
    current_amount: Optional[float] = None
    deadline: Optional[str] = None

    @classmethod
    def from_record(cls, record: RawRecord) -> "SavingsGoal":
        return cls(
            id=record.get("Id"),
            name=record.get("name_c") or record.get("Name"),
            target_amount=record.get("target_amount_c"),
            current_amount=record.get("current_amount_c"),
            deadline=record.get("deadline_c"),
        )


class SavingsGoalInput(WriteInput):
    name: Optional[str] = None
    target_amount: NumericInput = None
    current_amount: NumericInput = None
    deadline: Optional[str] = None

    def to_record(self, record_id: Optional[int] = None) -> RawRecord:
        record: RawRecord = {
            "name_c": self.name,
            "target_amount_c": parse_float(self.target_amount, "targetAmount"),
            "current_amount_c": parse_float(self.current_amount or 0, "currentAmount"),
            "deadline_c": self.deadline,
        }
        # The display name is fixed at creation; later renames only touch name_c.
        if record_id is None:
            return {"Name": self.name, **record}
        return {"Id": record_id, **record}
