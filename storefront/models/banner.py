"""
Banner model

Hero carousel slides. A banner is shown while active and inside its
[start_date, end_date] window; a null bound leaves that side open.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime

from storefront.core.database import Base
from storefront.core.utils import utcnow


class Banner(Base):
    __tablename__ = "banners"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    subtitle = Column(String)
    image = Column(String, nullable=False)
    button_text = Column(String)
    button_link = Column(String)
    is_active = Column(Boolean, default=True, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)
    start_date = Column(DateTime(timezone=True))
    end_date = Column(DateTime(timezone=True))

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
