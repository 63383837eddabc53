import contextlib
from typing import Iterator, Optional

from sqlalchemy.orm import sessionmaker

from database import database
from database.repository import MarketplaceRepository


@contextlib.contextmanager
def marketplace_uow(session_factory: Optional[sessionmaker] = None) -> Iterator[MarketplaceRepository]:
    """Repository bound to a fresh session that commits on success and rolls back on error.

    Usage:
        with marketplace_uow() as repo:
            service = ServiceMatchingService(data_source=repo)
            matches = service.get_top_matches(request_id)
    """
    with database.db_session_scope(session_factory or database.SessionLocal) as session:
        yield MarketplaceRepository(session)
