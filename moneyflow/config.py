"""
Application Configuration.

Pydantic Settings model for the MoneyFlow record layer.
All configuration is loaded from environment variables and .env files.
Inject an AppConfig instance via dependency injection where needed.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings


class AppConfig(BaseSettings):
    """Central configuration loaded from environment variables and defaults."""

    # --- Supabase ---
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: SecretStr = SecretStr("")
    REQUEST_TIMEOUT_S: float = Field(default=10.0, gt=0)

    # --- Record tables ---
    BUDGET_TABLE: str = "budget_c"
    CATEGORY_TABLE: str = "category_c"
    SAVINGS_GOAL_TABLE: str = "savings_goal_c"
    TRANSACTION_TABLE: str = "transaction_c"

    # Page size for list() / list_by_type() reads.
    LIST_PAGE_LIMIT: int = Field(default=100, ge=1)

    # --- Logging ---
    LOG_FILE: str = "moneyflow.log"
    LOG_MAX_BYTES: int = 5_242_880  # 5 MB
    LOG_BACKUP_COUNT: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @model_validator(mode="after")
    def _warn_missing_env(self) -> "AppConfig":
        """Emit a startup warning when the Supabase connection is not configured."""
        _log = logging.getLogger("moneyflow.config")

        if not Path(".env").exists():
            _log.warning(
                "No .env file found; all configuration loaded from "
                "environment variables or defaults."
            )

        if not self.SUPABASE_URL or not self.SUPABASE_ANON_KEY.get_secret_value():
            _log.warning(
                "SUPABASE_URL / SUPABASE_ANON_KEY are empty; the record "
                "service cannot be reached until they are set."
            )

        return self

    def validate_supabase_config(self) -> None:
        """Validate that the Supabase connection settings are complete.

        Raises:
            ValueError: If the URL or the anonymous key is missing.
        """
        if not self.SUPABASE_URL:
            raise ValueError("SUPABASE_URL must be set")
        if not self.SUPABASE_ANON_KEY.get_secret_value():
            raise ValueError("SUPABASE_ANON_KEY must be set")


# ---------------------------------------------------------------------------
# Module-level singleton factory
# ---------------------------------------------------------------------------

_config_instance: Optional[AppConfig] = None
_config_lock: threading.Lock = threading.Lock()


def get_config() -> AppConfig:
    """Return a cached ``AppConfig`` singleton.

    On first call, creates an ``AppConfig`` instance (reading from ``.env``).
    Subsequent calls return the same instance.  Prefer direct constructor
    injection of ``AppConfig`` in new code.
    """
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = AppConfig()
    return _config_instance
