"""
Database Connection Layer.

Owns the Supabase async client used by the record service layer.  This
module only manages the *connection*; it contains no query logic.  Data
access is performed through the repositories, which receive a
``RecordClient`` built from this connection.

Usage (dependency injection at app startup)::

    from moneyflow.database import DatabaseManager
    from moneyflow.logger import StructuredLogger

    db = DatabaseManager(
        supabase_url=config.SUPABASE_URL,
        supabase_key=config.SUPABASE_ANON_KEY.get_secret_value(),
        timeout_s=config.REQUEST_TIMEOUT_S,
        logger=StructuredLogger(name="moneyflow.database"),
    )
    await db.connect()
    client = db.record_client()
"""

from __future__ import annotations

from typing import Optional

from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions

from moneyflow.logger import StructuredLogger
from moneyflow.records.client import SupabaseRecordClient


class DatabaseManager:
    """Manages the connection to the Supabase record service.

    Parameters
    ----------
    supabase_url:
        The Supabase project URL (e.g. ``https://xyz.supabase.co``).
    supabase_key:
        The Supabase anonymous key.
    timeout_s:
        Per-request timeout handed to the PostgREST client.  Repositories
        never manage timeouts themselves.
    logger:
        A ``StructuredLogger`` instance for structured JSON log output.
    """

    def __init__(
        self,
        supabase_url: str,
        supabase_key: str,
        timeout_s: float,
        logger: StructuredLogger,
    ) -> None:
        self._url = supabase_url
        self._key = supabase_key
        self._timeout_s = timeout_s
        self._logger = logger
        self._supabase: Optional[AsyncClient] = None

    @property
    def supabase(self) -> AsyncClient:
        """Return the connected Supabase client.

        Raises
        ------
        RuntimeError
            If :meth:`connect` has not completed successfully.
        """
        if self._supabase is None:
            raise RuntimeError(
                "Supabase client is not connected. Call connect() first."
            )
        return self._supabase

    async def connect(self) -> AsyncClient:
        """Create the Supabase async client; idempotent.

        Raises
        ------
        ValueError
            If the URL or key is missing or malformed.
        """
        if self._supabase is not None:
            return self._supabase
        if not self._url or not self._key:
            raise ValueError("Supabase URL and key are required to connect")

        self._supabase = await acreate_client(
            self._url,
            self._key,
            options=AsyncClientOptions(postgrest_client_timeout=self._timeout_s),
        )
        self._logger.info("Supabase client initialized.")
        return self._supabase

    def record_client(self) -> SupabaseRecordClient:
        """Return a ``RecordClient`` bound to the connected Supabase client."""
        return SupabaseRecordClient(self.supabase, self._logger)

    async def close(self) -> None:
        """Release the PostgREST HTTP session.

        Safe to call multiple times; subsequent calls are no-ops.
        """
        if self._supabase is None:
            return
        client, self._supabase = self._supabase, None
        await client.postgrest.aclose()
        self._logger.info("Supabase connection closed.")
