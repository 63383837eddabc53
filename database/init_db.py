import logging
from typing import Any, Dict, Optional

import yaml
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from tenacity import retry, stop_after_attempt, wait_fixed

from database.models import (
    Base, Company, ProjectRecord, ServiceProviderProfileRecord, ServiceRequestRecord
)

logger = logging.getLogger(__name__)

# Seed file sections and the ORM model each one populates
SEED_SECTIONS = (
    ('companies', Company),
    ('service_requests', ServiceRequestRecord),
    ('service_providers', ServiceProviderProfileRecord),
    ('projects', ProjectRecord),
)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def init_db(engine: Optional[Engine] = None) -> None:
    if engine is None:
        from database.database import engine as default_engine
        engine = default_engine
    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tables created or verified.")
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise


def seed_from_yaml(session: Session, seed_path: str) -> Dict[str, int]:
    """
    Load marketplace records from a YAML seed file.

    Records are merged by primary key, so re-seeding updates rows in place.

    Returns:
        Number of records loaded per section
    """
    with open(seed_path, "r") as f:
        data: Dict[str, Any] = yaml.safe_load(f) or {}

    loaded = {}
    for section, model in SEED_SECTIONS:
        records = data.get(section) or []
        for record in records:
            session.merge(model(**record))
        loaded[section] = len(records)
        logger.info(f"Seeded {len(records)} {section}")

    session.flush()
    return loaded
