"""
Budget Repository.

Monthly category budgets, newest month first.
"""

from __future__ import annotations

from moneyflow.models.budget import Budget, BudgetInput
from moneyflow.repositories.base_repository import EntityRepository
from moneyflow.schema import BUDGET_SCHEMA


class BudgetRepository(EntityRepository[Budget, BudgetInput]):
    """Data access layer for Budget entities."""

    SCHEMA = BUDGET_SCHEMA
    MODEL = Budget
    INPUT_MODEL = BudgetInput
