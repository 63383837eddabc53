"""
Marketplace Data Source Interface - Read accessors the matching core depends on.

The matching services never own storage. They receive a data source at
construction time; NullDataSource stands in when none is configured.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from core.matching.models import (
    CompanyProfile, Project, ServiceProviderProfile, ServiceRequest
)


class DataSourceUnavailable(Exception):
    """Raised by a data source when its backing store cannot be read."""
    pass


class MarketplaceDataSource(ABC):
    """
    Abstract interface for marketplace read access (SQL repository, in-memory store, etc.).
    """

    @abstractmethod
    def get_service_request_by_id(self, request_id: str) -> Optional[ServiceRequest]:
        pass

    @abstractmethod
    def get_all_service_provider_profiles(self) -> List[ServiceProviderProfile]:
        pass

    @abstractmethod
    def get_all_projects(self) -> List[Project]:
        pass

    @abstractmethod
    def get_all_service_requests(self) -> List[ServiceRequest]:
        pass

    @abstractmethod
    def get_company_profile(self, company_id: str) -> Optional[CompanyProfile]:
        pass

    def get_company_skills(self, company_id: str) -> List[str]:
        """Declared skills of a company; empty when the company is unknown."""
        profile = self.get_company_profile(company_id)
        if profile is None:
            return []
        return list(profile.skills or [])


class NullDataSource(MarketplaceDataSource):
    """Data source with no data. Every accessor returns an empty result."""

    def get_service_request_by_id(self, request_id: str) -> Optional[ServiceRequest]:
        return None

    def get_all_service_provider_profiles(self) -> List[ServiceProviderProfile]:
        return []

    def get_all_projects(self) -> List[Project]:
        return []

    def get_all_service_requests(self) -> List[ServiceRequest]:
        return []

    def get_company_profile(self, company_id: str) -> Optional[CompanyProfile]:
        return None


class InMemoryDataSource(MarketplaceDataSource):
    """Data source over plain in-memory collections, kept in insertion order."""

    def __init__(
        self,
        service_requests: Optional[Iterable[ServiceRequest]] = None,
        providers: Optional[Iterable[ServiceProviderProfile]] = None,
        projects: Optional[Iterable[Project]] = None,
        companies: Optional[Iterable[CompanyProfile]] = None
    ):
        self.service_requests: Dict[str, ServiceRequest] = {r.id: r for r in service_requests or []}
        self.providers: List[ServiceProviderProfile] = list(providers or [])
        self.projects: List[Project] = list(projects or [])
        self.companies: Dict[str, CompanyProfile] = {c.id: c for c in companies or []}

    def get_service_request_by_id(self, request_id: str) -> Optional[ServiceRequest]:
        return self.service_requests.get(request_id)

    def get_all_service_provider_profiles(self) -> List[ServiceProviderProfile]:
        return list(self.providers)

    def get_all_projects(self) -> List[Project]:
        return list(self.projects)

    def get_all_service_requests(self) -> List[ServiceRequest]:
        return list(self.service_requests.values())

    def get_company_profile(self, company_id: str) -> Optional[CompanyProfile]:
        return self.companies.get(company_id)
