"""
Savings Goal Repository.

Savings goals, nearest deadline first.
"""

from __future__ import annotations

from moneyflow.models.savings_goal import SavingsGoal, SavingsGoalInput
from moneyflow.repositories.base_repository import EntityRepository
from moneyflow.schema import SAVINGS_GOAL_SCHEMA


class SavingsGoalRepository(EntityRepository[SavingsGoal, SavingsGoalInput]):
    """Data access layer for SavingsGoal entities."""

    SCHEMA = SAVINGS_GOAL_SCHEMA
    MODEL = SavingsGoal
    INPUT_MODEL = SavingsGoalInput
