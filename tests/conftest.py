import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ticket_dispenser.config import settings
from ticket_dispenser.db import get_db
from ticket_dispenser.main import app
from ticket_dispenser.models import Base
from ticket_dispenser.services import shared_counter


@pytest.fixture(autouse=True)
def fresh_shared_counter():
    shared_counter.reset()
    yield
    shared_counter.reset()


@pytest.fixture()
def max_ticket(monkeypatch):
    def set_limit(limit):
        monkeypatch.setattr(settings, "max_ticket", limit)

    return set_limit


@pytest.fixture()
def engine(tmp_path):
    db_path = tmp_path / "test.db"
    engine = create_engine(
        f"sqlite+pysqlite:///{db_path}", connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture()
def SessionLocal(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(SessionLocal):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(SessionLocal):
    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
