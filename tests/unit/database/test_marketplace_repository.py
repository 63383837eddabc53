#!/usr/bin/env python3
"""
Tests for MarketplaceRepository, the YAML seed loader and the unit of work.

Run against in-memory SQLite (see tests/__init__.py).
"""

from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from core.matching import (
    DataSourceUnavailable, OpportunityMatchingService, ServiceMatchingService
)
from core.matching.models import ProjectType
from database.init_db import init_db, seed_from_yaml
from database.models import ProjectRecord, ServiceRequestRecord
from database.repository import MarketplaceRepository, service_request_from_orm
from database.uow import marketplace_uow

pytestmark = pytest.mark.db


@pytest.fixture
def seeded_session(db_session, seed_path):
    seed_from_yaml(db_session, seed_path)
    db_session.commit()
    return db_session


class TestSeedLoading:

    def test_seed_counts(self, db_session, seed_path):
        loaded = seed_from_yaml(db_session, seed_path)
        assert loaded == {
            'companies': 3,
            'service_requests': 2,
            'service_providers': 3,
            'projects': 2,
        }

    def test_reseeding_updates_in_place(self, seeded_session, seed_path):
        seed_from_yaml(seeded_session, seed_path)
        seeded_session.commit()

        counts = MarketplaceRepository(seeded_session).count_rows()
        assert counts == {
            'company': 3,
            'service_request': 2,
            'service_provider_profile': 3,
            'project': 2,
        }

    def test_init_db_is_idempotent(self, db_engine):
        init_db(db_engine)
        init_db(db_engine)


class TestRepositoryMapping:

    def test_service_request_budget_and_location(self, seeded_session):
        request = MarketplaceRepository(seeded_session).get_service_request_by_id("sr-001")

        assert request.owner_company_id == "comp-beta"
        assert request.required_skills == ["Project Management", "Engineering", "Quality Control"]
        assert request.budget.min == 1000.0
        assert request.budget.max == 3000.0
        assert isinstance(request.budget.min, float)
        assert request.budget.currency == "SAR"
        assert request.location.city == "Riyadh"
        assert request.location.is_remote_allowed is False

    def test_unknown_request_is_none(self, seeded_session):
        assert MarketplaceRepository(seeded_session).get_service_request_by_id("missing") is None

    def test_providers_in_store_order(self, seeded_session):
        providers = MarketplaceRepository(seeded_session).get_all_service_provider_profiles()

        assert [p.id for p in providers] == ["sp-001", "sp-002", "sp-003"]
        assert providers[0].hourly_rate == 50.0
        assert providers[0].amount is None
        assert providers[1].amount == 4000.0

    def test_mega_project_sub_projects(self, seeded_session):
        projects = {p.id: p for p in MarketplaceRepository(seeded_session).get_all_projects()}

        mega = projects["prj-002"]
        assert mega.project_type == ProjectType.MEGA.value
        assert mega.is_mega
        assert [s.title for s in mega.sub_projects] == ["Marina", "Promenade"]
        assert mega.sub_projects[1].skill_requirements == ["Landscape", "civil engineering"]
        assert mega.location.is_remote_allowed is True
        assert projects["prj-001"].scope.skill_requirements == ["Civil Engineering", "Project Management", "Fire Safety"]

    def test_company_profile_and_skills(self, seeded_session):
        repo = MarketplaceRepository(seeded_session)
        company = repo.get_company_profile("comp-beta")

        assert company.name == "Beta Design Studio"
        assert company.payment_mode == "HYBRID"
        assert company.location.city == "Jeddah"
        assert repo.get_company_skills("comp-gamma") == ["Risk Assessment", "Feasibility Studies", "Legal"]
        assert repo.get_company_skills("missing") == []

    def test_request_without_budget_or_location(self):
        row = ServiceRequestRecord(
            id="sr-x", owner_company_id="co", title=None, status="OPEN",
            required_skills=None, budget_min=None, budget_max=Decimal("2500.00"), currency=None
        )
        request = service_request_from_orm(row)

        assert request.required_skills == []
        assert request.budget.min is None
        assert request.budget.max == 2500.0
        assert request.budget.currency == "SAR"
        assert request.location is None
        assert request.title == ""


class TestRepositoryErrors:

    def test_sqlalchemy_errors_become_unavailable(self):
        session = MagicMock()
        session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
        repo = MarketplaceRepository(session)

        with pytest.raises(DataSourceUnavailable):
            repo.get_all_projects()
        with pytest.raises(DataSourceUnavailable):
            repo.get_service_request_by_id("sr-001")

    def test_services_fail_soft_on_database_errors(self):
        session = MagicMock()
        session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
        repo = MarketplaceRepository(session)

        assert ServiceMatchingService(data_source=repo).match_service_providers_to_request("sr-001") == []
        assert ServiceMatchingService(data_source=repo).get_match_statistics("sr-001").total_matches == 0
        assert OpportunityMatchingService(data_source=repo).find_matches_for_company("comp-alpha", "vendor") == []


class TestMatchingOverDatabase:

    def test_service_matching_end_to_end(self, seeded_session):
        service = ServiceMatchingService(data_source=MarketplaceRepository(seeded_session))
        matches = service.match_service_providers_to_request("sr-001")

        assert [m.provider.id for m in matches] == ["sp-001", "sp-002"]
        assert matches[0].overall_score == pytest.approx(0.9)
        assert matches[1].pricing_score == pytest.approx(0.5)

    def test_opportunity_matching_end_to_end(self, seeded_session):
        service = OpportunityMatchingService(data_source=MarketplaceRepository(seeded_session))

        vendor = service.find_matches_for_company("comp-alpha", "vendor")
        assert [(m.target_id, m.match_score) for m in vendor] == [("prj-001", 67), ("prj-002", 33)]

        consultant = service.find_matches_for_company("comp-gamma", "consultant")
        assert [(m.target_id, m.match_score) for m in consultant] == [("sr-002", 100)]


class TestUnitOfWork:

    def test_commits_and_yields_repository(self, db_engine, seed_path):
        factory = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
        with marketplace_uow(factory) as repo:
            assert isinstance(repo, MarketplaceRepository)
            seed_from_yaml(repo.db, seed_path)

        with marketplace_uow(factory) as repo:
            assert repo.get_service_request_by_id("sr-002") is not None

    def test_rolls_back_on_error(self, db_engine):
        factory = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
        with pytest.raises(RuntimeError):
            with marketplace_uow(factory) as repo:
                repo.db.add(ProjectRecord(id="prj-tmp", owner_company_id="co", title="tmp"))
                repo.db.flush()
                raise RuntimeError("boom")

        with marketplace_uow(factory) as repo:
            assert repo.get_all_projects() == []
        with patch("database.database.SessionLocal", factory):
            with marketplace_uow() as repo:
                assert repo.get_all_projects() == []
