"""
Recommendation providers

The product detail page asks for two buckets ("you may also like" and
"pair it with"). The default provider is a fixed slice of the active catalog;
anything implementing RecommendationProvider can replace it.
"""
import logging
from typing import Dict, List, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import settings
from storefront.core.exceptions import InvalidRequestError
from storefront.models import Product
from storefront.services.entity_store import EntityStore

logger = logging.getLogger(__name__)

RECOMMENDATION_KINDS = ("also_like", "pair_with", "similar")


class RecommendationProvider(Protocol):
    async def recommend(self, db: AsyncSession, product: Product, kind: str) -> List[Product]:
        ...


class FixedSliceRecommender:
    """First N active products other than the subject, newest first."""

    def __init__(self, sizes: Optional[Dict[str, int]] = None):
        self.sizes = sizes or {
            "also_like": settings.RECOMMENDATION_ALSO_LIKE_COUNT,
            "pair_with": settings.RECOMMENDATION_PAIR_WITH_COUNT,
            "similar": settings.RECOMMENDATION_ALSO_LIKE_COUNT,
        }

    async def recommend(self, db: AsyncSession, product: Product, kind: str) -> List[Product]:
        if kind not in self.sizes:
            raise InvalidRequestError(f"Unknown recommendation type: {kind}", field="type")
        products = EntityStore(db, Product)
        return await products.list(
            Product.is_active == True,
            Product.id != product.id,
            order_by=(Product.created_at.desc(), Product.id.desc()),
            limit=self.sizes[kind],
        )
