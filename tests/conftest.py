"""
Test configuration and fixtures.

Provides:
- A fresh database per test (in-memory SQLite unless TEST_DATABASE_URL is set)
- Database session bound to it
- HTTPX AsyncClient with get_db overridden
"""
import os
from typing import AsyncGenerator, Generator

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

# Settings are read at import time; configure before importing the app
os.environ["DATABASE_URL"] = os.environ.get("TEST_DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ["ENV"] = "dev"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"

from booking_fixtures.main import app
from booking_fixtures.core.config import settings
from booking_fixtures.core.deps import get_db
from booking_fixtures.db.base import Base
from booking_fixtures.db.session import create_engine_with_settings
import booking_fixtures.db.models  # noqa: F401


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    """Create all tables on a fresh engine and drop them afterwards."""
    test_engine = create_engine_with_settings(settings)
    Base.metadata.create_all(test_engine)
    yield test_engine
    Base.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Session on the per-test database.

    App code commits freely; isolation comes from the fresh schema.
    """
    session = session_factory()
    yield session
    session.close()


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture(scope="function")
async def client(db: Session) -> AsyncGenerator[AsyncClient, None]:
    """
    Create AsyncClient for testing the dev endpoints.
    """
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as c:
        yield c

    app.dependency_overrides.clear()
