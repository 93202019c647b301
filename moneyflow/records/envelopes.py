"""
Record Service Envelopes.

Pydantic models for the request parameters and response envelopes of the
record service.  Every response carries a ``success`` flag and an optional
``message``; write operations additionally return one result per submitted
record so that a batch may mix successes and failures.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional, Union

from pydantic import BaseModel, Field, JsonValue

RawRecord = dict[str, JsonValue]
FilterValue = Union[str, int, float, bool]


class SortType(StrEnum):
    """Ordering direction for ``OrderBy``."""

    ASC = "ASC"
    DESC = "DESC"


class WhereOperator(StrEnum):
    """Supported filter predicates."""

    EQUAL_TO = "EqualTo"


# ---------------------------------------------------------------------------
# Request parameters
# ---------------------------------------------------------------------------


class OrderBy(BaseModel):
    field_name: str = Field(alias="fieldName")
    sort_type: SortType = Field(default=SortType.ASC, alias="sorttype")

    model_config = {"populate_by_name": True, "frozen": True}


class PagingInfo(BaseModel):
    limit: int = Field(default=100, ge=1)
    offset: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class WhereClause(BaseModel):
    field_name: str = Field(alias="FieldName")
    operator: WhereOperator = Field(default=WhereOperator.EQUAL_TO, alias="Operator")
    values: list[FilterValue] = Field(min_length=1, alias="Values")

    model_config = {"populate_by_name": True, "frozen": True}


class QueryParams(BaseModel):
    """Field selection, ordering, paging and filtering for a read.

    ``expand`` names relation fields that must come back as expanded
    objects (``{"Id": ..., "Name": ...}``) rather than bare identifiers.
    """

    fields: list[str] = Field(default_factory=list)
    expand: list[str] = Field(default_factory=list)
    order_by: list[OrderBy] = Field(default_factory=list, alias="orderBy")
    paging_info: Optional[PagingInfo] = Field(default=None, alias="pagingInfo")
    where: list[WhereClause] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "frozen": True}


class RecordsPayload(BaseModel):
    """Body of create / update calls: ``{"records": [...]}``."""

    records: list[RawRecord] = Field(min_length=1)


class DeletePayload(BaseModel):
    """Body of delete calls: ``{"RecordIds": [...]}``."""

    record_ids: list[int] = Field(min_length=1, alias="RecordIds")

    model_config = {"populate_by_name": True}


# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------


class FetchResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    data: Optional[list[RawRecord]] = None


class RecordResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    data: Optional[RawRecord] = None


class RecordResult(BaseModel):
    """Outcome of one record within a write batch."""

    success: bool
    message: Optional[str] = None
    data: Optional[RawRecord] = None


class BatchResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    results: Optional[list[RecordResult]] = None

    @property
    def succeeded(self) -> list[RecordResult]:
        return [r for r in self.results or [] if r.success]

    @property
    def failed(self) -> list[RecordResult]:
        return [r for r in self.results or [] if not r.success]
