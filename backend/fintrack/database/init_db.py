# fintrack/database/init_db.py
import logging

from sqlalchemy.engine import Engine

from fintrack.db.base import Base

logger = logging.getLogger(__name__)


def init_db(bind: Engine | None = None) -> None:
    # models must be imported so they register on the metadata
    from fintrack.models.category import Category        # noqa: F401
    from fintrack.models.transaction import Transaction  # noqa: F401

    if bind is None:
        from fintrack.database.session import engine as bind

    Base.metadata.create_all(bind=bind)
    logger.info("schema ready (%s)", ", ".join(sorted(Base.metadata.tables)))
