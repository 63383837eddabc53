from sqlalchemy import Column, Text, JSON, TIMESTAMP, ForeignKey, Boolean, Index, func

from .base import Base


class ProjectRecord(Base):
    """
    Project or mega-project posted by a company.

    Mega-projects keep their sub-project scopes in sub_projects as a list of
    {"title": ..., "skill_requirements": [...]} objects.
    """
    __tablename__ = 'project'

    id = Column(Text, primary_key=True)
    owner_company_id = Column(Text, ForeignKey('company.id', ondelete='CASCADE'), nullable=False)
    title = Column(Text, nullable=False, default='')

    status = Column(Text, nullable=False, default='active')  # draft|active|completed|cancelled
    visibility = Column(Text, nullable=False, default='public')  # public|private
    project_type = Column(Text, nullable=False, default='SINGLE')  # SINGLE|MEGA

    skill_requirements = Column(JSON, nullable=False, default=list)
    sub_projects = Column(JSON, nullable=False, default=list)

    city = Column(Text)
    country = Column(Text)
    is_remote_allowed = Column(Boolean, nullable=False, default=False)
    payment_mode = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index('idx_project_status_visibility', 'status', 'visibility'),
        Index('idx_project_owner', 'owner_company_id'),
    )
