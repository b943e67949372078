from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from fintrack.models.transaction import Transaction
from fintrack.stores.filters import Ordering, Pagination, TransactionFilters

logger = logging.getLogger(__name__)


@dataclass
class TransactionPage:
    items: list[Transaction]
    total: int
    pagination: Pagination = field(default_factory=Pagination)

    @property
    def total_pages(self) -> int:
        return self.pagination.total_pages(self.total)


class TransactionStore:
    """Session-scoped access to the ``transactions`` table."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        *,
        session_id: str,
        title: str,
        amount: Decimal | float,
        category_id: Optional[str] = None,
    ) -> Transaction:
        tx = Transaction(
            title=title,
            amount=float(amount),
            category_id=category_id,
            session_id=session_id,
        )
        self.db.add(tx)
        self.db.commit()
        self.db.refresh(tx)
        return tx

    def get(self, session_id: str, transaction_id: str) -> Optional[Transaction]:
        return (
            self.db.query(Transaction)
            .filter(Transaction.session_id == session_id, Transaction.id == transaction_id)
            .first()
        )

    def search(
        self,
        session_id: str,
        filters: TransactionFilters | None = None,
        ordering: Ordering | None = None,
        pagination: Pagination | None = None,
    ) -> TransactionPage:
        filters = filters or TransactionFilters()
        ordering = ordering or Ordering()
        pagination = pagination or Pagination()

        q = self.db.query(Transaction).filter(
            Transaction.session_id == session_id, *filters.clauses()
        )

        # counted before ordering/paging
        total = q.count()

        items = (
            q.order_by(*ordering.columns())
            .offset(pagination.offset)
            .limit(pagination.limit)
            .all()
        )
        logger.debug(
            "listed %d of %d transactions (page=%d limit=%d)",
            len(items), total, pagination.page, pagination.limit,
        )
        return TransactionPage(items=items, total=total, pagination=pagination)

    def summary(self, session_id: str) -> float:
        total = (
            self.db.query(func.coalesce(func.sum(Transaction.amount), 0))
            .filter(Transaction.session_id == session_id)
            .scalar()
        )
        return float(total or 0)
