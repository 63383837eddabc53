#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from core.matching import (
    MarketplaceDataSource, OpportunityMatchingService, ServiceMatchingService
)
from database.database import build_engine
from database.repository import MarketplaceRepository
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self):
        config = get_config()
        self.engine = build_engine(config.database.url)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


# Global database manager instance
_db_manager = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from _db_manager.get_session()


def get_data_source(db: Session = Depends(get_db)) -> MarketplaceDataSource:
    """Marketplace read accessors bound to the request's session."""
    return MarketplaceRepository(db)


def get_service_matching_service(
    data_source: MarketplaceDataSource = Depends(get_data_source)
) -> ServiceMatchingService:
    matching = get_config().matching
    return ServiceMatchingService(
        data_source=data_source,
        scoring_config=matching.scoring,
        config=matching.service_matching
    )


def get_opportunity_matching_service(
    data_source: MarketplaceDataSource = Depends(get_data_source)
) -> OpportunityMatchingService:
    return OpportunityMatchingService(
        data_source=data_source,
        config=get_config().matching.opportunity
    )
