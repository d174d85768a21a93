from pathlib import Path

from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / ".env.test"
load_dotenv(env_file)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from app.admin.dependencies import get_statistics_store  # noqa: E402
from app.admin.repositories.statistics_store import SqlAlchemyStatisticsStore  # noqa: E402
from app.db import base  # noqa: E402, F401
from app.db.session import Base, build_engine  # noqa: E402
from app.main import app  # noqa: E402
from tests.utils.in_memory_store import InMemoryStatisticsStore  # noqa: E402


@pytest.fixture
def test_engine(tmp_path):
    """File-backed SQLite so worker threads share the same data."""
    engine = build_engine(f"sqlite:///{tmp_path / 'statistics.db'}")
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session_local(test_engine):
    return sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(test_session_local):
    session = test_session_local()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sql_store(test_session_local):
    return SqlAlchemyStatisticsStore(test_session_local, timeout_seconds=5)


@pytest.fixture
def memory_store():
    return InMemoryStatisticsStore()


@pytest.fixture
async def test_app(sql_store):
    app.dependency_overrides[get_statistics_store] = lambda: sql_store

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def test_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        yield client
