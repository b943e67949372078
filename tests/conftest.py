import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fintrack.database.init_db import init_db
from fintrack.database.session import get_db
from fintrack.main import create_app


@pytest.fixture(scope="function")
def engine():
    """
    In-memory SQLite shared by every connection of one test.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def app(session_factory):
    app = create_app()

    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    return app


@pytest.fixture(scope="function")
def make_client(app):
    """
    Every client keeps its own cookie jar, i.e. acts as a separate browser.
    """
    def _make(**kwargs):
        return TestClient(app, **kwargs)
    return _make


@pytest.fixture(scope="function")
def client(make_client):
    return make_client()


def post_transaction(client, title="New Transaction", amount=1000, type="credit", **extra):
    body = {"title": title, "amount": amount, "type": type}
    body.update(extra)
    return client.post("/transactions", json=body)


@pytest.fixture
def create_tx():
    return post_transaction
