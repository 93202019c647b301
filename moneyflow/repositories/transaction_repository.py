"""
Transaction Repository.

Income and expense entries, most recent date first.  The related category
is read back as its display name.
"""

from __future__ import annotations

from moneyflow.models.transaction import Transaction, TransactionInput
from moneyflow.repositories.base_repository import EntityRepository
from moneyflow.schema import TRANSACTION_SCHEMA


class TransactionRepository(EntityRepository[Transaction, TransactionInput]):
    """Data access layer for Transaction entities."""

    SCHEMA = TRANSACTION_SCHEMA
    MODEL = Transaction
    INPUT_MODEL = TransactionInput
