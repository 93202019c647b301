"""
Domain Model Bases.

``DomainModel`` is the flattened, UI-facing shape returned by every
repository: a mandatory integer ``Id`` plus camelCase attributes.
``WriteInput`` is the shape accepted by ``create`` / ``update``: the same
camelCase keys, but with raw form values (numeric strings, comma lists)
that are coerced when converted to a storage record.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field

from moneyflow.records.envelopes import RawRecord
from moneyflow.utils.string_helpers import to_camel_case

NumericInput = Optional[Union[int, float, str]]
RelationValue = Optional[Union[int, float, str]]


class DomainModel(BaseModel):
    """Base for domain objects; ``Id`` always mirrors the storage primary key."""

    id: int = Field(alias="Id")

    model_config = {
        "alias_generator": to_camel_case,
        "populate_by_name": True,
        "from_attributes": True,
    }

    @classmethod
    def from_record(cls, record: RawRecord) -> "DomainModel":
        """Map a storage record to the domain shape."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, object]:
        """Return the camelCase dict consumed by the UI."""
        return self.model_dump(by_alias=True)


class WriteInput(BaseModel):
    """Base for create / update inputs in domain (camelCase) shape.

    Unknown keys are ignored so a previously returned domain object can be
    edited and submitted back.  Domain objects expose relations only by
    their resolved value, so updates send a relation id column only when
    the caller set it explicitly.
    """

    model_config = {
        "alias_generator": to_camel_case,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def to_record(self, record_id: Optional[int] = None) -> RawRecord:
        """Build the storage record; ``record_id`` is set for updates."""
        raise NotImplementedError
