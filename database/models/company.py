from sqlalchemy import Column, Text, JSON, TIMESTAMP, func

from .base import Base


class Company(Base):
    """
    Company (or individual account) acting on the marketplace.

    Declared skills drive opportunity matching; location and payment
    preference feed the optional compatibility sub-scores.
    """
    __tablename__ = 'company'

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False, default='')
    skills = Column(JSON, nullable=False, default=list)

    city = Column(Text)
    country = Column(Text)
    payment_mode = Column(Text)  # CASH|BARTER|HYBRID

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
