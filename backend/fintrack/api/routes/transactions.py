# fintrack/api/routes/transactions.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from fintrack.api.deps import (
    get_transaction_store,
    issue_session,
    optional_session,
    require_session,
)
from fintrack.schemas.transaction import (
    UUID_PATTERN,
    IsoDateTime,
    SortBy,
    SortOrder,
    TransactionCreate,
    TransactionType,
    serialize_transaction,
)
from fintrack.stores.filters import Ordering, Pagination, TransactionFilters
from fintrack.stores.transactions import TransactionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions")


# ========= listing (filters + sort + pagination) =========
@router.get("")
def list_transactions(
    response: Response,
    session_id: str = Depends(require_session),
    store: TransactionStore = Depends(get_transaction_store),
    start_date: Optional[IsoDateTime] = Query(None, alias="startDate"),
    end_date: Optional[IsoDateTime] = Query(None, alias="endDate"),
    tx_type: Optional[TransactionType] = Query(None, alias="type"),
    min_value: Optional[float] = Query(None, alias="minValue", allow_inf_nan=False),
    max_value: Optional[float] = Query(None, alias="maxValue", allow_inf_nan=False),
    category_id: Optional[str] = Query(None, alias="categoryId", pattern=UUID_PATTERN),
    sort_by: SortBy = Query("date", alias="sortBy"),
    order: SortOrder = Query("desc"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
):
    filters = TransactionFilters(
        start_date=start_date,
        end_date=end_date,
        type=tx_type,
        min_value=min_value,
        max_value=max_value,
        category_id=category_id,
    )
    result = store.search(
        session_id,
        filters=filters,
        ordering=Ordering(sort_by=sort_by, order=order),
        pagination=Pagination(page=page, limit=limit),
    )

    response.headers["X-Total-Count"] = str(result.total)
    response.headers["X-Total-Pages"] = str(result.total_pages)
    response.headers["X-Page"] = str(page)
    response.headers["X-Page-Size"] = str(limit)

    return {
        "data": [serialize_transaction(t) for t in result.items],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": result.total,
            "totalPages": result.total_pages,
        },
    }


# must stay above /{transaction_id}
@router.get("/summary")
def transactions_summary(
    session_id: str = Depends(require_session),
    store: TransactionStore = Depends(get_transaction_store),
):
    return {"summary": {"amount": store.summary(session_id)}}


@router.get("/{transaction_id}")
def get_transaction(
    session_id: str = Depends(require_session),
    store: TransactionStore = Depends(get_transaction_store),
    transaction_id: str = Path(pattern=UUID_PATTERN),
):
    # a miss is still 200, with a null transaction
    return {"transaction": serialize_transaction(store.get(session_id, transaction_id))}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_transaction(
    payload: TransactionCreate,
    session_id: Optional[str] = Depends(optional_session),
    store: TransactionStore = Depends(get_transaction_store),
):
    response = Response(status_code=status.HTTP_201_CREATED)
    if not session_id:
        session_id = issue_session(response)

    tx = store.create(
        session_id=session_id,
        title=payload.title,
        amount=payload.signed_amount(),
        category_id=payload.category_id,
    )
    logger.info("transaction %s created (%s %s)", tx.id, payload.type, payload.amount)
    return response
