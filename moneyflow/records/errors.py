"""
Record Layer Exceptions.

Typed errors raised below the repository layer.  Repositories catch both
and reduce them to their sentinel return values; neither ever reaches a
repository caller.
"""

from __future__ import annotations

from typing import Optional


class RemoteError(Exception):
    """The exchange with the record service itself failed.

    ``message`` carries the human-readable reason reported by the service
    (e.g. the ``message`` field of an error response body) when one could
    be extracted; ``status`` is the HTTP status code when known.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(message or "Record service request failed")
        self.message: Optional[str] = message
        self.status: Optional[int] = status


class MappingError(ValueError):
    """A domain input value could not be converted to its storage type."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Invalid numeric value for '{field}': {value!r}")
        self.field: str = field
        self.value: object = value


def describe_error(exc: BaseException) -> str:
    """Return the best human-readable message for *exc*.

    Prefers the service-reported message of a :class:`RemoteError` and
    falls back to the exception's own string form.
    """
    if isinstance(exc, RemoteError) and exc.message:
        return exc.message
    return str(exc) or type(exc).__name__
