"""
User model

Identity root for carts, wishlists, orders, reviews and addresses. Guest users
carry no email and is_guest=True.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, JSON

from storefront.core.database import Base
from storefront.core.utils import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=True)
    first_name = Column(String)
    last_name = Column(String)
    phone = Column(String)
    profile_image_url = Column(String)
    is_guest = Column(Boolean, default=False, nullable=False)
    preferences = Column(JSON)  # opaque blob, feeds recommendations

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, guest={self.is_guest})>"
