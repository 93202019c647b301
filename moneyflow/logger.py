"""
Record Layer Logging.

Every repository, the Supabase connection and the notifiers log through a
``StructuredLogger``.  Lines are JSON objects so that a failed call can be
traced by its ``entity`` / ``table`` / ``operation`` / ``record_id`` context,
which the repositories attach through ``extra``.  Output goes to stdout and
to the rotating file named by ``AppConfig.LOG_FILE``.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO, Union


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp`` (UTC), ``level``, ``logger_name``, ``message``, plus
    ``extra`` with the repository context (stringified) and ``exception``
    when a traceback is attached.
    """

    _STANDARD_ATTRS: frozenset[str] = frozenset(
        logging.LogRecord(
            name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None
        ).__dict__.keys()
    )

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Union[str, dict[str, str]]] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger_name": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, str] = {
            key: str(value)
            for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS
        }
        if extra_fields:
            entry["extra"] = extra_fields

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            entry["exception"] = record.exc_text

        return json.dumps(entry, ensure_ascii=False)


class StructuredLogger:
    """Logger handed to repositories, ``DatabaseManager`` and notifiers.

    File location and rotation default to ``AppConfig.LOG_FILE``,
    ``LOG_MAX_BYTES`` and ``LOG_BACKUP_COUNT``; tests pass ``log_file`` to
    keep output in a temporary directory.  Handlers are attached once per
    logger name.

    Usage::

        log = StructuredLogger(name="moneyflow.budgets")
        log.error("Failed to list budget: %s", message, extra={"entity": "budget"})
    """

    def __init__(
        self,
        name: str = "moneyflow",
        level: int = logging.INFO,
        stream: Union[TextIO, None] = None,
        log_file: Optional[str] = None,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
    ) -> None:
        self._logger: logging.Logger = logging.getLogger(name)
        self._logger.setLevel(level)

        # Handlers are attached once; later lookups of the same name reuse them.
        if self._logger.handlers:
            return

        formatter = JSONFormatter()
        stream_handler = logging.StreamHandler(stream or sys.stdout)
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        file_handler = self._file_handler(log_file, max_bytes, backup_count)
        if file_handler is not None:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    def _file_handler(
        self,
        log_file: Optional[str],
        max_bytes: Optional[int],
        backup_count: Optional[int],
    ) -> Optional[RotatingFileHandler]:
        """Open the rotating log file; ``None`` leaves console logging only."""
        if log_file is None or max_bytes is None or backup_count is None:
            # Imported here: config is only loaded when a setting is missing.
            from moneyflow.config import get_config
            cfg = get_config()
            log_file = log_file or cfg.LOG_FILE
            max_bytes = cfg.LOG_MAX_BYTES if max_bytes is None else max_bytes
            backup_count = cfg.LOG_BACKUP_COUNT if backup_count is None else backup_count

        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            return RotatingFileHandler(
                filename=str(log_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as exc:
            self._logger.warning(
                "Could not open log file '%s': %s. Logging to console only.",
                log_file,
                exc,
            )
            return None

    @property
    def logger(self) -> logging.Logger:
        """Access the underlying ``logging.Logger`` directly."""
        return self._logger

    # -- Convenience delegates ------------------------------------------------

    def debug(self, msg: str, *args: object, **kwargs: object) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args: object, **kwargs: object) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args: object, **kwargs: object) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args: object, **kwargs: object) -> None:
        self._logger.error(msg, *args, **kwargs)

    def critical(self, msg: str, *args: object, **kwargs: object) -> None:
        self._logger.critical(msg, *args, **kwargs)


def get_logger(name: str = "moneyflow") -> StructuredLogger:
    """Create and return a ``StructuredLogger`` instance with the given *name*."""
    return StructuredLogger(name=name)
