# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from taskdesk.core.store import Store
from taskdesk.main import create_app


@pytest.fixture()
def store() -> Store:
    """Fresh store with no sample data, so ids start at 1."""
    return Store()


@pytest.fixture()
def seeded_store() -> Store:
    s = Store()
    s.seed()
    return s


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """App over a freshly seeded store (3 users, 3 tasks)."""
    with TestClient(create_app(seed=True)) as c:
        yield c
