#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against in-memory data or an in-memory SQLite database,
so no external services are needed:

    # Run all tests
    python -m pytest tests/ -v

    # Skip database-backed tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Set TEST_DATABASE_URL to run the database tests against another
SQLAlchemy URL instead of in-memory SQLite.
"""

import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SEED_PATH = os.path.join(PROJECT_ROOT, "data", "seed.yaml")

# Database configuration
TEST_DB_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")


def get_test_db_url() -> str:
    """Get the test database URL."""
    return TEST_DB_URL


def create_test_engine(url: Optional[str] = None) -> Engine:
    """
    Create an engine with all marketplace tables.

    In-memory SQLite shares one connection so every session sees the
    same database.
    """
    from database.models import Base

    url = url or TEST_DB_URL
    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
    else:
        engine = create_engine(url)
    Base.metadata.create_all(engine)
    return engine
