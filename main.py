import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Any, List, Optional

from core.config_loader import load_config, AppConfig
from core.matching import OpportunityMatchingService, ServiceMatchingService
from database.database import build_engine, db_session_scope
from database.init_db import init_db, seed_from_yaml
from database.repository import MarketplaceRepository
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=str))


def run_init_db(engine: Engine, session_factory: sessionmaker, seed: Optional[str]) -> int:
    init_db(engine)
    if seed:
        with db_session_scope(session_factory) as session:
            loaded = seed_from_yaml(session, seed)
        logger.info(f"Seed complete: {loaded}")
    return 0


def run_match_request(config: AppConfig, session_factory: sessionmaker, args: argparse.Namespace) -> int:
    with db_session_scope(session_factory) as session:
        service = ServiceMatchingService(
            data_source=MarketplaceRepository(session),
            scoring_config=config.matching.scoring,
            config=config.matching.service_matching
        )
        if args.stats:
            _print_json(asdict(service.get_match_statistics(args.request_id)))
            return 0

        if args.top is not None:
            matches = service.get_top_matches(args.request_id, limit=args.top)
        elif args.min_score is not None:
            matches = service.get_matches_above_threshold(args.request_id, min_score=args.min_score)
        else:
            matches = service.match_service_providers_to_request(args.request_id)
        _print_json([asdict(m) for m in matches])
    return 0


def run_opportunities(config: AppConfig, session_factory: sessionmaker, args: argparse.Namespace) -> int:
    with db_session_scope(session_factory) as session:
        service = OpportunityMatchingService(
            data_source=MarketplaceRepository(session),
            config=config.matching.opportunity
        )
        matches = service.find_matches_for_company(args.company_id, args.role)
        _print_json([asdict(m) for m in matches])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PMTwin matching")
    parser.add_argument('--config', type=str, default='config.yaml', help='Path to config.yaml')
    subparsers = parser.add_subparsers(dest='command', required=True)

    init_parser = subparsers.add_parser('init-db', help='Create tables and optionally load seed data')
    init_parser.add_argument('--seed', type=str, default=None, help='YAML seed file')

    match_parser = subparsers.add_parser('match-request', help='Rank providers for a service request')
    match_parser.add_argument('request_id', type=str)
    group = match_parser.add_mutually_exclusive_group()
    group.add_argument('--top', type=int, default=None, help='Return only the top N matches')
    group.add_argument('--min-score', type=float, default=None, help='Minimum overall score (0-1)')
    group.add_argument('--stats', action='store_true', help='Print match statistics instead of matches')

    opp_parser = subparsers.add_parser('opportunities', help='Opportunities matching a company')
    opp_parser.add_argument('company_id', type=str)
    opp_parser.add_argument('--role', type=str, required=True,
                            help='vendor, service_provider, consultant (or their variants)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    engine = build_engine(config.database.url)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    if args.command == 'init-db':
        return run_init_db(engine, session_factory, args.seed)
    if args.command == 'match-request':
        return run_match_request(config, session_factory, args)
    return run_opportunities(config, session_factory, args)


if __name__ == "__main__":
    sys.exit(main())
