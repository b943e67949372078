from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from fintrack.core.config import settings
from fintrack.database.session import get_db
from fintrack.db.base import new_id
from fintrack.schemas.category import CategoryCreate
from fintrack.stores.categories import CategoryStore
from fintrack.stores.transactions import TransactionStore

logger = logging.getLogger(__name__)


def get_transaction_store(db: Session = Depends(get_db)) -> TransactionStore:
    return TransactionStore(db)


def get_category_store(db: Session = Depends(get_db)) -> CategoryStore:
    return CategoryStore(db)


# ---------- session cookie ----------
def optional_session(request: Request) -> Optional[str]:
    # opaque token: no format check
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or None


def require_session(session_id: Optional[str] = Depends(optional_session)) -> str:
    if not session_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return session_id


def issue_session(response: Response) -> str:
    """Mint a new session token and ask the client to keep it as a cookie."""
    session_id = new_id()
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        path="/",
        max_age=settings.SESSION_COOKIE_MAX_AGE,
        httponly=True,
        samesite="lax",
    )
    logger.info("new session issued (%s...)", session_id[:8])
    return session_id


# ---------- bodies that need a session first ----------
async def category_payload(
    request: Request,
    session_id: str = Depends(require_session),
) -> CategoryCreate:
    # parsed here, after require_session, so a missing cookie beats a bad body
    raw = await request.body()
    try:
        return CategoryCreate.model_validate_json(raw or b"null")
    except ValidationError as exc:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in exc.errors(include_url=False)]
        ) from exc
