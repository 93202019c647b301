"""
Record Service Client.

Defines the ``RecordClient`` contract consumed by the repositories and the
``SupabaseRecordClient`` implementation of it over the Supabase async
client (PostgREST).

Contract summary:

- Reads return ``{success, message?, data?}`` envelopes.
- Writes return ``{success, message?, results?}`` with one result per
  submitted record.
- A service-reported problem is returned as ``success=False`` with the
  service message.  A broken exchange (network, timeout, malformed
  response) is raised as :class:`RemoteError`.
"""

from __future__ import annotations

from typing import Protocol

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from moneyflow.logger import StructuredLogger
from moneyflow.records.envelopes import (
    BatchResponse,
    DeletePayload,
    FetchResponse,
    QueryParams,
    RawRecord,
    RecordResponse,
    RecordResult,
    RecordsPayload,
    SortType,
    WhereClause,
)
from moneyflow.records.errors import RemoteError

PRIMARY_KEY: str = "Id"
DISPLAY_FIELD: str = "Name"


class RecordClient(Protocol):
    """Asynchronous record CRUD against a named table."""

    async def fetch_records(self, table: str, params: QueryParams) -> FetchResponse: ...

    async def get_record_by_id(
        self, table: str, record_id: int, params: QueryParams
    ) -> RecordResponse: ...

    async def create_record(self, table: str, payload: RecordsPayload) -> BatchResponse: ...

    async def update_record(self, table: str, payload: RecordsPayload) -> BatchResponse: ...

    async def delete_record(self, table: str, payload: DeletePayload) -> BatchResponse: ...


def to_remote_error(exc: httpx.HTTPError) -> RemoteError:
    """Build a :class:`RemoteError` from a transport failure.

    Prefers the ``message`` field of a JSON error body, falling back to the
    transport error text.
    """
    status = None
    message = None
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])
    return RemoteError(message or str(exc) or type(exc).__name__, status=status)


class SupabaseRecordClient:
    """``RecordClient`` backed by ``supabase.AsyncClient``.

    Batches are executed one record per request so that every record gets
    its own :class:`RecordResult`; PostgREST would otherwise reject the
    whole batch on the first bad row.
    """

    def __init__(self, client: AsyncClient, logger: StructuredLogger) -> None:
        self._client = client
        self._logger = logger

    # -- Reads ----------------------------------------------------------------

    async def fetch_records(self, table: str, params: QueryParams) -> FetchResponse:
        query = self._client.table(table).select(self._select_clause(params))
        for clause in params.where:
            query = self._apply_where(query, clause)
        for order in params.order_by:
            query = query.order(order.field_name, desc=order.sort_type is SortType.DESC)
        if params.paging_info is not None:
            start = params.paging_info.offset
            query = query.range(start, start + params.paging_info.limit - 1)

        try:
            response = await query.execute()
        except APIError as exc:
            return FetchResponse(success=False, message=self._api_message(exc))
        except httpx.HTTPError as exc:
            raise to_remote_error(exc) from exc

        self._logger.debug(
            "Fetched %d record(s) from %s", len(response.data or []), table
        )
        return FetchResponse(success=True, data=response.data or [])

    async def get_record_by_id(
        self, table: str, record_id: int, params: QueryParams
    ) -> RecordResponse:
        query = (
            self._client.table(table)
            .select(self._select_clause(params))
            .eq(PRIMARY_KEY, record_id)
            .limit(1)
        )
        try:
            response = await query.execute()
        except APIError as exc:
            return RecordResponse(success=False, message=self._api_message(exc))
        except httpx.HTTPError as exc:
            raise to_remote_error(exc) from exc

        rows = response.data or []
        return RecordResponse(success=True, data=rows[0] if rows else None)

    # -- Writes ---------------------------------------------------------------

    async def create_record(self, table: str, payload: RecordsPayload) -> BatchResponse:
        results = [await self._insert_one(table, record) for record in payload.records]
        return BatchResponse(success=True, results=results)

    async def update_record(self, table: str, payload: RecordsPayload) -> BatchResponse:
        results = [await self._update_one(table, record) for record in payload.records]
        return BatchResponse(success=True, results=results)

    async def delete_record(self, table: str, payload: DeletePayload) -> BatchResponse:
        results = [await self._delete_one(table, record_id) for record_id in payload.record_ids]
        return BatchResponse(success=True, results=results)

    async def _insert_one(self, table: str, record: RawRecord) -> RecordResult:
        try:
            response = await self._client.table(table).insert(record).execute()
        except APIError as exc:
            return RecordResult(success=False, message=self._api_message(exc))
        except httpx.HTTPError as exc:
            raise to_remote_error(exc) from exc

        rows = response.data or []
        if not rows:
            return RecordResult(success=False, message="Record was not created")
        return RecordResult(success=True, data=rows[0])

    async def _update_one(self, table: str, record: RawRecord) -> RecordResult:
        record_id = record.get(PRIMARY_KEY)
        if record_id is None:
            return RecordResult(success=False, message="Record is missing its Id")
        values = {key: value for key, value in record.items() if key != PRIMARY_KEY}

        try:
            response = await (
                self._client.table(table)
                .update(values)
                .eq(PRIMARY_KEY, record_id)
                .execute()
            )
        except APIError as exc:
            return RecordResult(success=False, message=self._api_message(exc))
        except httpx.HTTPError as exc:
            raise to_remote_error(exc) from exc

        rows = response.data or []
        if not rows:
            return RecordResult(success=False, message=f"Record {record_id} not found")
        return RecordResult(success=True, data=rows[0])

    async def _delete_one(self, table: str, record_id: int) -> RecordResult:
        try:
            response = await (
                self._client.table(table)
                .delete()
                .eq(PRIMARY_KEY, record_id)
                .execute()
            )
        except APIError as exc:
            return RecordResult(success=False, message=self._api_message(exc))
        except httpx.HTTPError as exc:
            raise to_remote_error(exc) from exc

        if not response.data:
            return RecordResult(success=False, message=f"Record {record_id} not found")
        return RecordResult(success=True)

    # -- Helpers --------------------------------------------------------------

    @staticmethod
    def _select_clause(params: QueryParams) -> str:
        """Render a PostgREST ``select`` list.

        Expanded relations become embedded resources, e.g.
        ``category_c(Id,Name)``.  The primary key is always selected.
        """
        if not params.fields:
            return "*"
        columns = [PRIMARY_KEY]
        for field in params.fields:
            if field == PRIMARY_KEY:
                continue
            if field in params.expand:
                columns.append(f"{field}({PRIMARY_KEY},{DISPLAY_FIELD})")
            else:
                columns.append(field)
        return ",".join(columns)

    @staticmethod
    def _apply_where(query, clause: WhereClause):
        # EqualTo is the only operator; several values mean "any of".
        if len(clause.values) == 1:
            return query.eq(clause.field_name, clause.values[0])
        return query.in_(clause.field_name, clause.values)

    @staticmethod
    def _api_message(exc: APIError) -> str:
        return exc.message or str(exc)
