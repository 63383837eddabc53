import logging
from decimal import Decimal
from typing import List, Optional, Any, Dict

from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from core.matching.interfaces import MarketplaceDataSource, DataSourceUnavailable
from core.matching.models import (
    Budget, CompanyProfile, Location, Project, ProjectScope,
    ServiceProviderProfile, ServiceRequest
)
from database.models import (
    Company, ProjectRecord, ServiceProviderProfileRecord, ServiceRequestRecord
)

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return float(value)
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def _location(row: Any) -> Optional[Location]:
    if not row.city and not row.country:
        return None
    return Location(city=row.city, country=row.country, is_remote_allowed=bool(getattr(row, 'is_remote_allowed', False)))


def _skills(value: Any) -> List[str]:
    return list(value) if isinstance(value, (list, tuple)) else []


def service_request_from_orm(row: ServiceRequestRecord) -> ServiceRequest:
    budget = None
    if row.budget_min is not None or row.budget_max is not None:
        budget = Budget(
            min=_to_float(row.budget_min),
            max=_to_float(row.budget_max),
            currency=row.currency or 'SAR'
        )
    return ServiceRequest(
        id=row.id,
        owner_company_id=row.owner_company_id,
        required_skills=_skills(row.required_skills),
        budget=budget,
        status=row.status,
        request_type=row.request_type,
        title=row.title or '',
        location=_location(row),
        payment_mode=row.payment_mode
    )


def provider_from_orm(row: ServiceProviderProfileRecord) -> ServiceProviderProfile:
    return ServiceProviderProfile(
        id=row.id,
        user_id=row.user_id,
        skills=_skills(row.skills),
        availability_status=row.availability_status,
        pricing_model=row.pricing_model,
        hourly_rate=_to_float(row.hourly_rate),
        amount=_to_float(row.amount)
    )


def project_from_orm(row: ProjectRecord) -> Project:
    sub_projects = []
    for sub in row.sub_projects or []:
        if isinstance(sub, dict):
            sub_projects.append(ProjectScope(
                skill_requirements=_skills(sub.get('skill_requirements')),
                title=sub.get('title', '')
            ))
    return Project(
        id=row.id,
        owner_company_id=row.owner_company_id,
        status=row.status,
        visibility=row.visibility,
        project_type=row.project_type,
        scope=ProjectScope(skill_requirements=_skills(row.skill_requirements), title=row.title or ''),
        sub_projects=sub_projects,
        title=row.title or '',
        location=_location(row),
        payment_mode=row.payment_mode
    )


def company_from_orm(row: Company) -> CompanyProfile:
    return CompanyProfile(
        id=row.id,
        name=row.name or '',
        skills=_skills(row.skills),
        location=_location(row),
        payment_mode=row.payment_mode
    )


class MarketplaceRepository(MarketplaceDataSource):
    """
    Read accessors over the marketplace tables.

    Rows are converted to plain dataclasses so results stay usable after
    the session closes. Database errors surface as DataSourceUnavailable.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_service_request_by_id(self, request_id: str) -> Optional[ServiceRequest]:
        stmt = select(ServiceRequestRecord).where(ServiceRequestRecord.id == request_id)
        row = self._execute(stmt, 'get_service_request_by_id').scalar_one_or_none()
        return service_request_from_orm(row) if row is not None else None

    def get_all_service_provider_profiles(self) -> List[ServiceProviderProfile]:
        stmt = select(ServiceProviderProfileRecord).order_by(ServiceProviderProfileRecord.created_at, ServiceProviderProfileRecord.id)
        rows = self._execute(stmt, 'get_all_service_provider_profiles').scalars().all()
        return [provider_from_orm(r) for r in rows]

    def get_all_projects(self) -> List[Project]:
        stmt = select(ProjectRecord).order_by(ProjectRecord.created_at, ProjectRecord.id)
        rows = self._execute(stmt, 'get_all_projects').scalars().all()
        return [project_from_orm(r) for r in rows]

    def get_all_service_requests(self) -> List[ServiceRequest]:
        stmt = select(ServiceRequestRecord).order_by(ServiceRequestRecord.created_at, ServiceRequestRecord.id)
        rows = self._execute(stmt, 'get_all_service_requests').scalars().all()
        return [service_request_from_orm(r) for r in rows]

    def get_company_profile(self, company_id: str) -> Optional[CompanyProfile]:
        stmt = select(Company).where(Company.id == company_id)
        row = self._execute(stmt, 'get_company_profile').scalar_one_or_none()
        return company_from_orm(row) if row is not None else None

    def count_rows(self) -> Dict[str, int]:
        """Row counts per marketplace table, for seeding logs."""
        counts = {}
        for model in (Company, ServiceRequestRecord, ServiceProviderProfileRecord, ProjectRecord):
            rows = self._execute(select(model.id), 'count_rows').all()
            counts[model.__tablename__] = len(rows)
        return counts

    def _execute(self, stmt, operation: str):
        try:
            return self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Database error in {operation}: {e}")
            raise DataSourceUnavailable(f"{operation} failed: {e}") from e
