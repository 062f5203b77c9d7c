"""
Cart Service

Carts are addressed by CartIdentity. Reads join every row with its product
and fail with DataIntegrityError when a product has disappeared underneath a
cart, instead of returning a line with nothing in it.
"""
import logging
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import DataIntegrityError, InvalidRequestError, NotFoundError
from storefront.models import CartItem, Product
from storefront.services.entity_store import EntityStore
from storefront.services.identity import CartIdentity
from storefront.services.views import CartLine, CartView

logger = logging.getLogger(__name__)


def check_quantity(quantity: int) -> int:
    if quantity is None or quantity < 1:
        raise InvalidRequestError("quantity must be at least 1", field="quantity")
    return quantity


async def load_products(
    products: EntityStore,
    rows: Sequence,
    owner: str,
) -> Dict[int, Product]:
    """Batch-load the products referenced by rows; any gap is an integrity failure."""
    found = await products.get_many(row.product_id for row in rows)
    for row in rows:
        if row.product_id not in found:
            logger.error(f"{owner} {row.id} references missing product {row.product_id}")
            raise DataIntegrityError(
                f"{owner} {row.id} references a product that no longer exists",
                entity=owner,
                entity_id=row.id,
                missing="Product",
                missing_id=row.product_id,
            )
    return found


class CartService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.items = EntityStore(db, CartItem, "Cart item")
        self.products = EntityStore(db, Product)

    async def list_items(self, identity: CartIdentity) -> List[CartItem]:
        return await self.items.list(
            identity.matches(CartItem),
            order_by=(CartItem.created_at.asc(), CartItem.id.asc()),
        )

    async def get_cart(self, identity: CartIdentity) -> CartView:
        rows = await self.list_items(identity)
        products = await load_products(self.products, rows, "Cart item")
        lines = [CartLine(item=row, product=products[row.product_id]) for row in rows]
        subtotal = sum(
            (Decimal(line.product.price) * line.item.quantity for line in lines),
            Decimal("0"),
        )
        return CartView(
            items=lines,
            subtotal=subtotal,
            item_count=sum(line.item.quantity for line in lines),
        )

    async def add_to_cart(
        self,
        identity: CartIdentity,
        product_id: int,
        quantity: int = 1,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> CartItem:
        identity.require()
        check_quantity(quantity)

        product = await self.products.get(product_id)
        if product is None or not product.is_active:
            raise NotFoundError("Product", product_id)

        existing = await self.items.find_one(
            identity.matches(CartItem),
            CartItem.product_id == product_id,
            CartItem.size.is_(None) if size is None else CartItem.size == size,
            CartItem.color.is_(None) if color is None else CartItem.color == color,
        )
        if existing:
            return await self.items.update(existing.id, quantity=existing.quantity + quantity)

        item = await self.items.create(
            product_id=product_id,
            quantity=quantity,
            size=size,
            color=color,
            **identity.owner_columns(),
        )
        logger.debug(f"Cart item {item.id} added: product {product_id} x{quantity}")
        return item

    async def update_cart_quantity(self, item_id: int, quantity: int) -> CartItem:
        """Set a row's quantity. Callers translate quantity < 1 into remove_from_cart."""
        check_quantity(quantity)
        return await self.items.update(item_id, quantity=quantity)

    async def remove_from_cart(self, item_id: int) -> None:
        await self.items.delete(item_id)

    async def clear_cart(self, identity: CartIdentity) -> int:
        removed = await self.items.delete_where(identity.matches(CartItem))
        logger.debug(f"Cart cleared for {identity}: {removed} rows")
        return removed
