import pytest
from fastapi.testclient import TestClient

from billtracker import db
from billtracker.main import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    """App client backed by a throwaway SQLite file."""
    monkeypatch.setattr(db, "DB_PATH", str(tmp_path / "bills.sqlite3"))
    with TestClient(app) as client:  # runs startup -> init_db
        yield client


@pytest.fixture
def add_bill(client):
    def _add(**fields):
        response = client.post("/bills", json=fields)
        assert response.status_code == 200, response.text
        return response.json()
    return _add
