from sqlalchemy.orm import Session

from fintrack.models.category import Category


class CategoryStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, *, session_id: str, name: str) -> Category:
        cat = Category(name=name, session_id=session_id)
        self.db.add(cat); self.db.commit(); self.db.refresh(cat)
        return cat

    def delete(self, session_id: str, category_id: str) -> int:
        """Delete one of the session's categories; returns the number of rows removed."""
        deleted = (
            self.db.query(Category)
            .filter(Category.session_id == session_id, Category.id == category_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted
