import os

# Cheap hashes for tests; must be set before employee_api.core.security is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture(autouse=True)
def _patch_settings(monkeypatch):
    from employee_api.core.config import settings
    monkeypatch.setattr(settings, "expose_error_details", False)
    monkeypatch.setattr(settings, "default_page_size", 4)
    monkeypatch.setattr(settings, "max_page_size", 100)


@pytest.fixture
def mock_db():
    """Create a mock async database session."""
    db = AsyncMock()
    db.flush = AsyncMock()
    db.refresh = AsyncMock()
    db.add = MagicMock()
    db.delete = AsyncMock()
    db.get = AsyncMock(return_value=None)
    db.execute = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


@pytest.fixture
def store(monkeypatch):
    """In-memory employee store swapped in for the SQL repository."""
    from employee_api.services import employee_service
    from tests.factories import FakeEmployeeStore

    fake = FakeEmployeeStore()
    monkeypatch.setattr(employee_service, "employee_repo", fake)
    return fake
