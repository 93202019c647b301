"""
MoneyFlow Records Entry Point.

Bootstraps the dependency graph via constructor injection, connects to the
Supabase record service and prints a JSON snapshot of every entity list.
Every subsystem is wired here; there are no module-level globals.

Usage::

    python main.py
"""

from __future__ import annotations

import asyncio
import json
import sys

from moneyflow.config import get_config
from moneyflow.database import DatabaseManager
from moneyflow.logger import StructuredLogger, get_logger
from moneyflow.notifications import LoggingNotifier
from moneyflow.repositories import create_repositories


async def run() -> dict[str, list[dict[str, object]]]:
    """Wire dependencies and read every entity list."""
    logger: StructuredLogger = get_logger("moneyflow.main")

    # ------------------------------------------------------------------
    # 1. Configuration (from .env / environment variables)
    # ------------------------------------------------------------------
    config = get_config()
    config.validate_supabase_config()

    # ------------------------------------------------------------------
    # 2. Connection to the record service
    # ------------------------------------------------------------------
    db = DatabaseManager(
        supabase_url=config.SUPABASE_URL,
        supabase_key=config.SUPABASE_ANON_KEY.get_secret_value(),
        timeout_s=config.REQUEST_TIMEOUT_S,
        logger=StructuredLogger(name="moneyflow.database"),
    )
    await db.connect()

    try:
        # --------------------------------------------------------------
        # 3. Repositories (single composition root)
        # --------------------------------------------------------------
        repos = create_repositories(
            client=db.record_client(),
            config=config,
            notifier=LoggingNotifier(get_logger("moneyflow.notifications")),
        )

        budgets, categories, goals, transactions = await asyncio.gather(
            repos["budgets"].list_all(),
            repos["categories"].list_all(),
            repos["savings_goals"].list_all(),
            repos["transactions"].list_all(),
        )
        logger.info(
            "Loaded %d budgets, %d categories, %d savings goals, %d transactions",
            len(budgets),
            len(categories),
            len(goals),
            len(transactions),
        )
        return {
            "budgets": [b.to_dict() for b in budgets],
            "categories": [c.to_dict() for c in categories],
            "savingsGoals": [g.to_dict() for g in goals],
            "transactions": [t.to_dict() for t in transactions],
        }
    finally:
        await db.close()


def main() -> None:
    snapshot = asyncio.run(run())
    json.dump(snapshot, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
    except Exception as exc:
        sys.stderr.write(f"FATAL: {type(exc).__name__}: {exc}\n")
        sys.exit(1)
