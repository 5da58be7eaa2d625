import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["PLATFORM_USER_TOKENS"] = ""

from datetime import datetime, timedelta

import pytest
import pytz
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from oms.database.database import init_db
from oms.database.dependencies import get_order_service
from oms.main import app
from oms.models.enums import Role
from oms.services.order import OrderService
from oms.utils.types import Requester


COOLDOWN_SECONDS = 3 * 60 * 60


class FakeClock:
    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=pytz.UTC)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def requester():
    return Requester(authorization="Bearer test-token", roles=frozenset({Role.PLATFORM_USER}))


@pytest.fixture
def service(db, clock):
    return OrderService(db, cooldown_seconds=COOLDOWN_SECONDS, clock=clock)


@pytest.fixture
def client(session_factory, clock):
    def _get_order_service():
        db = session_factory()
        try:
            yield OrderService(db, cooldown_seconds=COOLDOWN_SECONDS, clock=clock)
        finally:
            db.close()

    app.dependency_overrides[get_order_service] = _get_order_service
    with TestClient(app, headers={"Authorization": "Bearer test-token"}) as test_client:
        yield test_client
    app.dependency_overrides.clear()
