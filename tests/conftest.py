"""Shared fixtures: a fresh in-memory history store wired into the app."""

import pytest
from fastapi.testclient import TestClient

from database import MemoryHistoryStore, get_history_store
from main import app
from schemas import ScanRecordCreate


@pytest.fixture
def store():
    return MemoryHistoryStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_history_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def candidate():
    return ScanRecordCreate(barcode="123", productName="Test")
