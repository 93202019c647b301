"""Shared fixtures: an in-memory record service and wired repositories."""

from __future__ import annotations

import copy
from typing import Optional, Union

import pytest

from moneyflow.config import AppConfig
from moneyflow.logger import StructuredLogger
from moneyflow.notifications import CollectingNotifier
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
)
from moneyflow.repositories import RepositoryContainer, create_repositories

Canned = Union[FetchResponse, RecordResponse, BatchResponse, Exception]


class FakeRecordClient:
    """In-memory ``RecordClient``.

    Records live in ``tables[table][Id]``.  Setting ``responses[method]``
    to an envelope returns it verbatim; setting it to an exception raises
    it, simulating a broken exchange.
    """

    def __init__(self) -> None:
        self.tables: dict[str, dict[int, RawRecord]] = {}
        self.responses: dict[str, Canned] = {}
        self.calls: list[tuple[str, str, object]] = []
        self._next_id = 1

    def seed(self, table: str, *records: RawRecord) -> None:
        rows = self.tables.setdefault(table, {})
        for record in records:
            rows[int(record["Id"])] = copy.deepcopy(record)
            self._next_id = max(self._next_id, int(record["Id"]) + 1)

    def _canned(self, method: str) -> Optional[Canned]:
        canned = self.responses.get(method)
        if isinstance(canned, Exception):
            raise canned
        return canned

    async def fetch_records(self, table: str, params: QueryParams) -> FetchResponse:
        self.calls.append(("fetch_records", table, params))
        canned = self._canned("fetch_records")
        if canned is not None:
            return canned

        rows = list(self.tables.get(table, {}).values())
        for clause in params.where:
            rows = [r for r in rows if r.get(clause.field_name) in clause.values]
        for order in reversed(params.order_by):
            rows.sort(
                key=lambda r: str(r.get(order.field_name) or ""),
                reverse=order.sort_type is SortType.DESC,
            )
        if params.paging_info is not None:
            start = params.paging_info.offset
            rows = rows[start:start + params.paging_info.limit]
        return FetchResponse(success=True, data=copy.deepcopy(rows))

    async def get_record_by_id(
        self, table: str, record_id: int, params: QueryParams
    ) -> RecordResponse:
        self.calls.append(("get_record_by_id", table, record_id))
        canned = self._canned("get_record_by_id")
        if canned is not None:
            return canned
        record = self.tables.get(table, {}).get(record_id)
        return RecordResponse(success=True, data=copy.deepcopy(record))

    async def create_record(self, table: str, payload: RecordsPayload) -> BatchResponse:
        self.calls.append(("create_record", table, payload))
        canned = self._canned("create_record")
        if canned is not None:
            return canned
        results = []
        for record in payload.records:
            stored = {"Id": self._next_id, **copy.deepcopy(record)}
            self.tables.setdefault(table, {})[self._next_id] = stored
            self._next_id += 1
            results.append(RecordResult(success=True, data=copy.deepcopy(stored)))
        return BatchResponse(success=True, results=results)

    async def update_record(self, table: str, payload: RecordsPayload) -> BatchResponse:
        self.calls.append(("update_record", table, payload))
        canned = self._canned("update_record")
        if canned is not None:
            return canned
        results = []
        rows = self.tables.setdefault(table, {})
        for record in payload.records:
            existing = rows.get(record["Id"])
            if existing is None:
                results.append(RecordResult(success=False, message="Record does not exist"))
                continue
            existing.update(copy.deepcopy(record))
            results.append(RecordResult(success=True, data=copy.deepcopy(existing)))
        return BatchResponse(success=True, results=results)

    async def delete_record(self, table: str, payload: DeletePayload) -> BatchResponse:
        self.calls.append(("delete_record", table, payload))
        canned = self._canned("delete_record")
        if canned is not None:
            return canned
        rows = self.tables.setdefault(table, {})
        results = [
            RecordResult(success=rows.pop(record_id, None) is not None)
            for record_id in payload.record_ids
        ]
        return BatchResponse(success=True, results=results)

    def methods_called(self) -> list[str]:
        return [method for method, _, _ in self.calls]


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(SUPABASE_URL="https://example.supabase.co", SUPABASE_ANON_KEY="anon")


@pytest.fixture
def logger(tmp_path_factory: pytest.TempPathFactory) -> StructuredLogger:
    log_file = tmp_path_factory.getbasetemp() / "moneyflow-test.log"
    return StructuredLogger(name="moneyflow.tests", log_file=str(log_file))


@pytest.fixture
def client() -> FakeRecordClient:
    return FakeRecordClient()


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def repos(
    client: FakeRecordClient,
    config: AppConfig,
    notifier: CollectingNotifier,
    logger: StructuredLogger,
) -> RepositoryContainer:
    return create_repositories(client, config, notifier, logger)
