"""
Entity Schemas.

Declarative description of how each entity is read from the record
service: which columns are selected, which relations come back expanded
and how ``list()`` is ordered.  The storage <-> domain field mapping lives
on the models themselves (``from_record`` / ``to_record``).

Table names are configuration (``AppConfig.*_TABLE``) and are bound when a
repository is constructed.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from moneyflow.records.envelopes import OrderBy, PagingInfo, QueryParams, SortType, WhereClause


class EntitySchema(BaseModel):
    """Read shape of one entity type."""

    entity: str = Field(min_length=1)
    fields: tuple[str, ...]
    expand: tuple[str, ...] = ()
    order_by: Optional[OrderBy] = None

    model_config = {"frozen": True}

    def query(
        self,
        paging: Optional[PagingInfo] = None,
        where: Optional[list[WhereClause]] = None,
    ) -> QueryParams:
        """Build the ``QueryParams`` selecting this entity's columns."""
        return QueryParams(
            fields=list(self.fields),
            expand=list(self.expand),
            order_by=[self.order_by] if self.order_by is not None else [],
            paging_info=paging,
            where=where or [],
        )


BUDGET_SCHEMA = EntitySchema(
    entity="budget",
    fields=(
        "Name",
        "monthly_limit_c",
        "spent_c",
        "month_c",
        "alert_threshold_c",
        "alert_methods_c",
        "category_c",
    ),
    expand=("category_c",),
    order_by=OrderBy(field_name="month_c", sort_type=SortType.DESC),
)

CATEGORY_SCHEMA = EntitySchema(
    entity="category",
    fields=("Name", "name_c", "type_c", "icon_c", "color_c"),
)

SAVINGS_GOAL_SCHEMA = EntitySchema(
    entity="savings goal",
    fields=("Name", "name_c", "target_amount_c", "current_amount_c", "deadline_c"),
    order_by=OrderBy(field_name="deadline_c", sort_type=SortType.ASC),
)

TRANSACTION_SCHEMA = EntitySchema(
    entity="transaction",
    fields=("Name", "type_c", "amount_c", "date_c", "description_c", "category_c"),
    expand=("category_c",),
    order_by=OrderBy(field_name="date_c", sort_type=SortType.DESC),
)
