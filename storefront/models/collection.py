"""
Collection model

Curated product drops; upcoming collections carry a launch date.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text

from storefront.core.database import Base
from storefront.core.utils import utcnow


class Collection(Base):
    __tablename__ = "collections"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text)
    image = Column(String)
    is_upcoming = Column(Boolean, default=False, nullable=False)
    launch_date = Column(DateTime(timezone=True))
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
