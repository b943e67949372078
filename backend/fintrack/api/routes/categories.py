import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from fintrack.api.deps import category_payload, get_category_store, require_session
from fintrack.schemas.category import CategoryCreate
from fintrack.schemas.transaction import UUID_PATTERN
from fintrack.stores.categories import CategoryStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_category(
    session_id: str = Depends(require_session),
    store: CategoryStore = Depends(get_category_store),
    payload: CategoryCreate = Depends(category_payload),
):
    cat = store.create(session_id=session_id, name=payload.name)
    logger.info("category %s created", cat.id)
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    session_id: str = Depends(require_session),
    store: CategoryStore = Depends(get_category_store),
    category_id: str = Path(pattern=UUID_PATTERN),
):
    # another session's id looks exactly like a missing one
    if store.delete(session_id, category_id) == 0:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Category not found")
    logger.info("category %s deleted", category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
