"""
Record Service Layer.

Request/response envelopes and the asynchronous client contract used by
the repositories, plus its Supabase-backed implementation.
"""

from moneyflow.records.client import RecordClient, SupabaseRecordClient
from moneyflow.records.envelopes import (
    BatchResponse,
    DeletePayload,
    FetchResponse,
    OrderBy,
    PagingInfo,
    QueryParams,
    RawRecord,
    RecordResponse,
    RecordResult,
    RecordsPayload,
    SortType,
    WhereClause,
    WhereOperator,
)
from moneyflow.records.errors import MappingError, RemoteError, describe_error

__all__ = [
    "BatchResponse",
    "DeletePayload",
    "FetchResponse",
    "MappingError",
    "OrderBy",
    "PagingInfo",
    "QueryParams",
    "RawRecord",
    "RecordClient",
    "RecordResponse",
    "RecordResult",
    "RecordsPayload",
    "RemoteError",
    "SortType",
    "SupabaseRecordClient",
    "WhereClause",
    "WhereOperator",
    "describe_error",
]
