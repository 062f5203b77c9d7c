"""
Product model

Central catalog entity. is_active=False removes a product from listings while
keeping order history intact; hard deletes are possible but leave any cart or
wishlist rows pointing at it dangling, which the read paths report as a
DataIntegrityError.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, JSON, Numeric, ForeignKey, Index

from storefront.core.database import Base
from storefront.core.utils import utcnow


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        Index("ix_products_active_created", "is_active", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text)

    # Pricing
    price = Column(Numeric(10, 2), nullable=False)
    compare_at_price = Column(Numeric(10, 2))  # strike-through price for deals

    # Categorization
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)

    # Media and variants (ordered lists)
    images = Column(JSON, default=list)
    sizes = Column(JSON, default=list)
    colors = Column(JSON, default=list)

    # Merchandising flags
    is_new = Column(Boolean, default=False, nullable=False)
    is_trending = Column(Boolean, default=False, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_deal = Column(Boolean, default=False, nullable=False)

    # Inventory
    stock = Column(Integer, default=0, nullable=False)

    # Reviews summary
    rating = Column(Numeric(3, 2), default=0)
    review_count = Column(Integer, default=0, nullable=False)

    # Metadata
    is_active = Column(Boolean, default=True, nullable=False)
    tags = Column(JSON, default=list)
    material_info = Column(Text)
    care_instructions = Column(Text)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Product(id={self.id}, slug={self.slug}, active={self.is_active})>"
