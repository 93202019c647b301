"""
MoneyFlow Records.

Data-access layer for budgets, categories, savings goals and transactions
stored in a Supabase-hosted record service.
"""

__version__ = "1.0.0"
