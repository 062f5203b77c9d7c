"""
Address model

Saved postal addresses for a user. Orders copy the address into their own
shipping_address snapshot, so editing or deleting here never rewrites history.
"""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, DateTime

from storefront.core.database import Base
from storefront.core.utils import utcnow


class Address(Base):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    address_line_1 = Column(String, nullable=False)
    address_line_2 = Column(String)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    pincode = Column(String(20), nullable=False)
    country = Column(String(100), nullable=False, default="India")
    is_default = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Address(id={self.id}, city={self.city}, default={self.is_default})>"
