from .base import Base
from .company import Company
from .service import ServiceRequestRecord, ServiceProviderProfileRecord
from .project import ProjectRecord

__all__ = [
    'Base',
    'Company',
    'ServiceRequestRecord',
    'ServiceProviderProfileRecord',
    'ProjectRecord',
]
