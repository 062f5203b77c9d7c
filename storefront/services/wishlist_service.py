"""
Wishlist Service
"""
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import NotFoundError
from storefront.models import Product, WishlistItem
from storefront.services.cart_service import load_products
from storefront.services.entity_store import EntityStore
from storefront.services.identity import require_user_id
from storefront.services.views import WishlistLine

logger = logging.getLogger(__name__)


class WishlistService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.items = EntityStore(db, WishlistItem, "Wishlist item")
        self.products = EntityStore(db, Product)

    async def get_wishlist(self, user_id: Optional[int]) -> List[WishlistLine]:
        require_user_id(user_id)
        rows = await self.items.list(
            WishlistItem.user_id == user_id,
            order_by=(WishlistItem.created_at.desc(), WishlistItem.id.desc()),
        )
        products = await load_products(self.products, rows, "Wishlist item")
        return [WishlistLine(item=row, product=products[row.product_id]) for row in rows]

    async def add_to_wishlist(self, user_id: Optional[int], product_id: int) -> WishlistItem:
        require_user_id(user_id)
        if await self.products.get(product_id) is None:
            raise NotFoundError("Product", product_id)

        existing = await self.items.find_one(
            WishlistItem.user_id == user_id,
            WishlistItem.product_id == product_id,
        )
        if existing:
            return existing
        return await self.items.create(user_id=user_id, product_id=product_id)

    async def remove_from_wishlist(self, user_id: Optional[int], product_id: int) -> int:
        require_user_id(user_id)
        return await self.items.delete_where(
            WishlistItem.user_id == user_id,
            WishlistItem.product_id == product_id,
        )
