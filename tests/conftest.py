import pytest
from fastapi.testclient import TestClient

from main import app

NIL_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_request():
    def _make(method="greeting", name="Oliver", **overrides):
        body = {"id": NIL_ID, "jsonrpc": "2.0", "method": method, "params": {"name": name}}
        body.update(overrides)
        return body
    return _make
