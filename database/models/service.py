from sqlalchemy import Column, Text, JSON, Numeric, TIMESTAMP, ForeignKey, Boolean, Index, func

from .base import Base


class ServiceRequestRecord(Base):
    """Service request posted by a company, seeking providers."""
    __tablename__ = 'service_request'

    id = Column(Text, primary_key=True)
    owner_company_id = Column(Text, ForeignKey('company.id', ondelete='CASCADE'), nullable=False)
    title = Column(Text, nullable=False, default='')

    status = Column(Text, nullable=False, default='OPEN')  # OPEN|OFFERED|APPROVED|IN_PROGRESS|COMPLETED|CANCELLED
    request_type = Column(Text)  # NORMAL|ADVISORY
    required_skills = Column(JSON, nullable=False, default=list)

    budget_min = Column(Numeric(14, 2))
    budget_max = Column(Numeric(14, 2))
    currency = Column(Text, nullable=False, default='SAR')

    city = Column(Text)
    country = Column(Text)
    is_remote_allowed = Column(Boolean, nullable=False, default=False)
    payment_mode = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index('idx_service_request_status', 'status'),
        Index('idx_service_request_owner', 'owner_company_id'),
    )


class ServiceProviderProfileRecord(Base):
    """Skills, availability and pricing of a service provider."""
    __tablename__ = 'service_provider_profile'

    id = Column(Text, primary_key=True)
    user_id = Column(Text, nullable=False)
    skills = Column(JSON, nullable=False, default=list)

    availability_status = Column(Text, nullable=False, default='AVAILABLE')  # AVAILABLE|BUSY|UNAVAILABLE
    pricing_model = Column(Text)  # HOURLY|FIXED|RETAINER
    hourly_rate = Column(Numeric(12, 2))
    amount = Column(Numeric(14, 2))

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index('idx_provider_availability', 'availability_status'),
    )
