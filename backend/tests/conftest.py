import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from medrecords.config import settings  # noqa: E402
from medrecords.services.query_service import (  # noqa: E402
    InMemoryQueryExecutor,
    get_query_executor,
)

VALID_REQUEST = {"description": "flu", "id_patient": 42, "id_user": 7}


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def query_executor():
    return InMemoryQueryExecutor()


@pytest.fixture()
def app():
    from medrecords.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture()
def client(app, query_executor):
    app.dependency_overrides[get_query_executor] = lambda: query_executor
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def returning_id(monkeypatch):
    monkeypatch.setattr(settings, "return_record_id", True)


@pytest.fixture()
def valid_request():
    return dict(VALID_REQUEST)
