"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest
from sqlalchemy.orm import sessionmaker

from tests import SEED_PATH, create_test_engine
from tests.mocks.marketplace_mocks import build_marketplace


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring a database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def marketplace():
    """In-memory marketplace with known providers, requests and projects."""
    return build_marketplace()


@pytest.fixture
def db_engine():
    """Fresh in-memory SQLite engine with all marketplace tables created."""
    engine = create_test_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seed_path():
    return SEED_PATH
