"""
Cart model

A cart row is owned by exactly one identity key: a registered user or an
anonymous guest session. The check constraint enforces it at the database.
"""
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Index, CheckConstraint

from storefront.core.database import Base
from storefront.core.utils import utcnow


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    session_id = Column(String, nullable=True, index=True)  # guest carts
    # No cascade: deleting a product under a live cart must fail loudly.
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

    quantity = Column(Integer, default=1, nullable=False)
    size = Column(String)
    color = Column(String)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint(
            "(user_id IS NULL) <> (session_id IS NULL)",
            name="ck_cart_items_single_owner",
        ),
        CheckConstraint("quantity >= 1", name="ck_cart_items_quantity_positive"),
        Index("ix_cart_items_user_product", "user_id", "product_id"),
        Index("ix_cart_items_session_product", "session_id", "product_id"),
    )
