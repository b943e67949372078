"""
Query builder for the transaction listing.

Every supplied filter becomes one SQLAlchemy clause; the listing ANDs them
together with the session match. Omitted filters add nothing.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import asc, desc

from fintrack.models.transaction import Transaction as TM

# sortBy -> column
ORDER_MAP = {
    "value": TM.amount,
    "date": TM.created_at,
}


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class TransactionFilters:
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    type: Optional[str] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    category_id: Optional[str] = None

    def clauses(self) -> list:
        conds = []
        start, end = _as_utc(self.start_date), _as_utc(self.end_date)
        if start is not None:
            conds.append(TM.created_at >= start)
        if end is not None:
            conds.append(TM.created_at <= end)
        # no type column: direction is the sign of the stored amount
        if self.type == "credit":
            conds.append(TM.amount > 0)
        elif self.type == "debit":
            conds.append(TM.amount < 0)
        if self.min_value is not None:
            conds.append(TM.amount >= self.min_value)
        if self.max_value is not None:
            conds.append(TM.amount <= self.max_value)
        if self.category_id:
            conds.append(TM.category_id == self.category_id)
        return conds


@dataclass
class Ordering:
    sort_by: str = "date"
    order: str = "desc"

    def columns(self) -> list:
        direction = asc if self.order == "asc" else desc
        col = ORDER_MAP.get(self.sort_by, TM.created_at)
        # id keeps equal sort keys in a fixed order
        return [direction(col), direction(TM.id)]


@dataclass
class Pagination:
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return (total + self.limit - 1) // self.limit
