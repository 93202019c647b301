"""
Data Models Package.

Re-exports the domain models and their write inputs:
    from moneyflow.models import Budget, BudgetInput, Category, Transaction
"""

from moneyflow.models.base import DomainModel, WriteInput
from moneyflow.models.budget import Budget, BudgetInput
from moneyflow.models.category import Category, CategoryInput
from moneyflow.models.relation import (
    ExpandedRelation,
    Relation,
    ScalarRelation,
    decode_relation,
    resolve_relation,
)
from moneyflow.models.savings_goal import SavingsGoal, SavingsGoalInput
from moneyflow.models.transaction import Transaction, TransactionInput

__all__ = [
    "Budget",
    "BudgetInput",
    "Category",
    "CategoryInput",
    "DomainModel",
    "ExpandedRelation",
    "Relation",
    "SavingsGoal",
    "SavingsGoalInput",
    "ScalarRelation",
    "Transaction",
    "TransactionInput",
    "WriteInput",
    "decode_relation",
    "resolve_relation",
]
