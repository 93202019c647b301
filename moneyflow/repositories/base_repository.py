"""
Base Repository.

Generic CRUD over one entity table of the record service.  Subclasses only
declare their ``SCHEMA`` (selected columns, ordering), ``MODEL`` (domain
shape) and ``INPUT_MODEL`` (write shape).

Every public operation is shielded: errors raised while mapping or while
talking to the service are logged with their context and converted to the
operation's sentinel (``[]``, ``None`` or ``False``).  Nothing is raised to
the caller.  Service-reported failures are additionally pushed to the
``Notifier``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Awaitable, Callable, Generic, Optional, TypeVar, Union

from pydantic import BaseModel

from moneyflow.logger import StructuredLogger
from moneyflow.models.base import DomainModel, WriteInput
from moneyflow.notifications import Notifier
from moneyflow.records.client import RecordClient
from moneyflow.records.envelopes import (
    BatchResponse,
    DeletePayload,
    PagingInfo,
    QueryParams,
    RawRecord,
    RecordResult,
    RecordsPayload,
)
from moneyflow.records.errors import describe_error
from moneyflow.schema import EntitySchema
from moneyflow.utils.coercion import parse_int

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=DomainModel)
InputT = TypeVar("InputT", bound=WriteInput)

RecordId = Union[int, str]
WriteData = Union[WriteInput, DomainModel, Mapping[str, object]]


class EntityRepository(Generic[ModelT, InputT]):
    """Base class for all entity repositories. Receives dependencies via __init__."""

    SCHEMA: EntitySchema
    MODEL: type[ModelT]
    INPUT_MODEL: type[InputT]

    def __init__(
        self,
        client: RecordClient,
        table: str,
        notifier: Notifier,
        logger: StructuredLogger,
        page_limit: int = 100,
    ) -> None:
        self._client = client
        self._table = table
        self._notifier = notifier
        self._logger = logger
        self._paging = PagingInfo(limit=page_limit, offset=0)

    @property
    def table(self) -> str:
        return self._table

    @property
    def entity(self) -> str:
        return self.SCHEMA.entity

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def list_all(self) -> list[ModelT]:
        """Fetch up to one page of records in the schema's canonical order."""
        return await self._fetch(self.SCHEMA.query(self._paging), operation_name="list")

    async def get_by_id(self, record_id: RecordId) -> Optional[ModelT]:
        """Fetch one record; ``None`` when it does not exist or the call fails."""
        parsed = self._parse_id(record_id, operation_name="get_by_id")
        if parsed is None:
            return None

        async def _op() -> Optional[ModelT]:
            response = await self._client.get_record_by_id(
                self._table, parsed, self.SCHEMA.query()
            )
            if not response.success:
                self._report_failure("get_by_id", response.message, record_id=parsed)
                return None
            if not response.data:
                return None
            return self._to_model(response.data)

        return await self._shielded(
            _op, lambda: None, operation_name="get_by_id", record_id=parsed
        )

    async def create(self, data: WriteData) -> Optional[ModelT]:
        """Create one record and return it in domain shape, or ``None``."""

        async def _op() -> Optional[ModelT]:
            record = self._to_input(data).to_record()
            response = await self._client.create_record(
                self._table, RecordsPayload(records=[record])
            )
            return self._first_written(response, operation_name="create")

        return await self._shielded(_op, lambda: None, operation_name="create")

    async def update(self, record_id: RecordId, data: WriteData) -> Optional[ModelT]:
        """Update one record and return it in domain shape, or ``None``."""
        parsed = self._parse_id(record_id, operation_name="update")
        if parsed is None:
            return None

        async def _op() -> Optional[ModelT]:
            record = self._to_input(data).to_record(record_id=parsed)
            response = await self._client.update_record(
                self._table, RecordsPayload(records=[record])
            )
            return self._first_written(response, operation_name="update", record_id=parsed)

        return await self._shielded(
            _op, lambda: None, operation_name="update", record_id=parsed
        )

    async def delete(self, record_id: RecordId) -> bool:
        """Delete one record; ``True`` iff the service confirmed the deletion."""
        parsed = self._parse_id(record_id, operation_name="delete")
        if parsed is None:
            return False

        async def _op() -> bool:
            response = await self._client.delete_record(
                self._table, DeletePayload(record_ids=[parsed])
            )
            if not response.success:
                self._report_failure("delete", response.message, record_id=parsed)
                return False
            return bool(self._split_batch(response, operation_name="delete", record_id=parsed))

        return await self._shielded(
            _op, lambda: False, operation_name="delete", record_id=parsed
        )

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    async def _fetch(
        self,
        params: QueryParams,
        *,
        operation_name: str,
        notify: bool = True,
    ) -> list[ModelT]:
        """Run a multi-record read and map every valid row."""

        async def _op() -> list[ModelT]:
            response = await self._client.fetch_records(self._table, params)
            if not response.success:
                self._report_failure(operation_name, response.message, notify=notify)
                return []
            models = []
            for row in response.data or []:
                model = self._to_model(row)
                if model is not None:
                    models.append(model)
            return models

        return await self._shielded(_op, list, operation_name=operation_name)

    async def _shielded(
        self,
        op: Callable[[], Awaitable[T]],
        default_factory: Callable[[], T],
        *,
        operation_name: str,
        record_id: Optional[int] = None,
    ) -> T:
        """Await ``op()``; on any error log it with context and return the default.

        Parameters
        ----------
        op:
            Zero-argument coroutine function performing the exchange.
        default_factory:
            Produces the sentinel returned when ``op`` raises.
        operation_name:
            Label for log messages, e.g. ``"create"``.
        record_id:
            Included in the log context when the operation targets one record.
        """
        try:
            return await op()
        except Exception as exc:
            self._logger.error(
                "Error during %s on %s%s: %s",
                operation_name,
                self.entity,
                f" {record_id}" if record_id is not None else "",
                describe_error(exc),
                extra=self._context(operation_name, record_id),
            )
            return default_factory()

    def _first_written(
        self,
        response: BatchResponse,
        *,
        operation_name: str,
        record_id: Optional[int] = None,
    ) -> Optional[ModelT]:
        if not response.success:
            self._report_failure(operation_name, response.message, record_id=record_id)
            return None
        succeeded = self._split_batch(
            response, operation_name=operation_name, record_id=record_id
        )
        if not succeeded or succeeded[0].data is None:
            return None
        return self._to_model(succeeded[0].data)

    def _split_batch(
        self,
        response: BatchResponse,
        *,
        operation_name: str,
        record_id: Optional[int] = None,
    ) -> list[RecordResult]:
        """Report every failed result of a write batch; return the successes."""
        failed = response.failed
        if failed:
            self._logger.error(
                "Failed to %s %d %s record(s): %s",
                operation_name,
                len(failed),
                self.entity,
                json.dumps([r.model_dump(mode="json", exclude_none=True) for r in failed]),
                extra=self._context(operation_name, record_id),
            )
            for result in failed:
                if result.message:
                    self._notifier.error(result.message)
        return response.succeeded

    def _report_failure(
        self,
        operation_name: str,
        message: Optional[str],
        *,
        record_id: Optional[int] = None,
        notify: bool = True,
    ) -> None:
        """Log a service-reported failure and, unless disabled, notify the user."""
        self._logger.error(
            "Failed to %s %s: %s",
            operation_name,
            self.entity,
            message,
            extra=self._context(operation_name, record_id),
        )
        if notify and message:
            self._notifier.error(message)

    def _to_model(self, record: RawRecord) -> Optional[ModelT]:
        """Map a storage record; records without a valid ``Id`` are dropped."""
        try:
            return self.MODEL.from_record(record)
        except ValueError as exc:  # includes pydantic.ValidationError
            self._logger.warning(
                "Skipping malformed %s record: %s",
                self.entity,
                exc,
                extra=self._context("map", None),
            )
            return None

    def _to_input(self, data: WriteData) -> InputT:
        if isinstance(data, self.INPUT_MODEL):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(by_alias=True)
        return self.INPUT_MODEL.model_validate(data)

    def _parse_id(self, record_id: RecordId, *, operation_name: str) -> Optional[int]:
        parsed = parse_int(record_id)
        if parsed is None:
            self._logger.warning(
                "Invalid %s id for %s: %r",
                self.entity,
                operation_name,
                record_id,
                extra=self._context(operation_name, None),
            )
        return parsed

    def _context(self, operation_name: str, record_id: Optional[int]) -> dict[str, object]:
        context: dict[str, object] = {
            "entity": self.entity,
            "table": self._table,
            "operation": operation_name,
        }
        if record_id is not None:
            context["record_id"] = record_id
        return context
