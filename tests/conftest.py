import os
import tempfile
from datetime import datetime, timezone

import pytest


# Settings and the engine are built at import time: point them at a throwaway
# SQLite file before anything imports the application package.
_TEST_DIR = tempfile.mkdtemp(prefix="swissvault-tests-")
TEST_DB_PATH = os.path.join(_TEST_DIR, "test.db")
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_ENV"] = "dev"
os.environ["DEBUG"] = "false"

from sqlmodel import SQLModel, Session  # noqa: E402

from swissvault import models  # noqa: E402,F401
from swissvault.db import PersistenceGateway, engine  # noqa: E402


FROZEN_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _fresh_schema():
    # Every test starts from empty tables
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture()
def session():
    with Session(engine) as session:
        yield session


@pytest.fixture()
def gateway(session: Session) -> PersistenceGateway:
    return PersistenceGateway(session)


@pytest.fixture()
def frozen_clock():
    return lambda: FROZEN_NOW


@pytest.fixture()
def fast_hasher():
    """Real bcrypt hashing at the lowest cost factor to keep tests quick."""
    from swissvault.security import get_password_hash

    calls = []

    def _hash(password: str, rounds: int) -> str:
        calls.append(rounds)
        return get_password_hash(password, rounds=4)

    _hash.calls = calls  # type: ignore[attr-defined]
    return _hash
