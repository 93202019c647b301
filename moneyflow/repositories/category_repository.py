"""
Category Repository.

Categories are returned unordered.  ``list_by_type`` is a best-effort
lookup used to populate pickers: its failures are logged but never shown
to the user.
"""

from __future__ import annotations

from moneyflow.models.category import Category, CategoryInput
from moneyflow.records.envelopes import WhereClause, WhereOperator
from moneyflow.repositories.base_repository import EntityRepository
from moneyflow.schema import CATEGORY_SCHEMA

TYPE_FIELD: str = "type_c"


class CategoryRepository(EntityRepository[Category, CategoryInput]):
    """Data access layer for Category entities."""

    SCHEMA = CATEGORY_SCHEMA
    MODEL = Category
    INPUT_MODEL = CategoryInput

    async def list_by_type(self, category_type: str) -> list[Category]:
        """Fetch categories whose type equals *category_type* exactly."""
        where = [
            WhereClause(
                field_name=TYPE_FIELD,
                operator=WhereOperator.EQUAL_TO,
                values=[category_type],
            )
        ]
        return await self._fetch(
            self.SCHEMA.query(self._paging, where=where),
            operation_name="list_by_type",
            notify=False,
        )
