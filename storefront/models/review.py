"""
Review model
"""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, DateTime, Text, JSON, CheckConstraint

from storefront.core.database import Base
from storefront.core.utils import utcnow


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=True)

    rating = Column(Integer, nullable=False)
    title = Column(String)
    comment = Column(Text)
    images = Column(JSON, default=list)
    # Only set explicitly; an order_id alone does not verify a purchase.
    is_verified = Column(Boolean, default=False, nullable=False)
    helpful_count = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
    )
