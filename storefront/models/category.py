"""
Category model

Flat catalog taxonomy. Inactive categories are hidden from listings, never
physically removed.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text

from storefront.core.database import Base
from storefront.core.utils import utcnow


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    image = Column(String)
    description = Column(Text)
    is_active = Column(Boolean, default=True, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
