from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column
from fintrack.db.base import Base, new_id, utcnow


class Transaction(Base):
    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # signed: > 0 credit, < 0 debit
    amount: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), default=utcnow, nullable=False
    )
    # no FK: deleting a category leaves its transactions pointing at it
    category_id: Mapped[str | None] = mapped_column("categoryId", String(36), nullable=True)
    session_id: Mapped[str] = mapped_column("sessionId", String(255), index=True, nullable=False)
