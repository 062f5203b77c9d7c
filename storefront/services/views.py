"""
Read-time compositions

Each view wraps the row it describes and exposes that row's columns as its own
attributes, so response schemas validate straight from it.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional

from storefront.models import CartItem, Category, Order, OrderItem, Product, Review, WishlistItem


class _RowView:
    """Delegate unknown attribute reads to the wrapped row."""

    _row_attr: str = ""

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name == self._row_attr:
            raise AttributeError(name)
        return getattr(getattr(self, self._row_attr), name)


@dataclass
class Recommendations:
    also_like: List[Product] = field(default_factory=list)
    pair_with: List[Product] = field(default_factory=list)


@dataclass
class ProductDetail(_RowView):
    product: Product
    category: Optional[Category]
    reviews: List[Review]
    recommendations: Recommendations

    _row_attr = "product"


@dataclass
class CartLine(_RowView):
    item: CartItem
    product: Product

    _row_attr = "item"


@dataclass
class CartView:
    items: List[CartLine]
    subtotal: Decimal
    item_count: int


@dataclass
class WishlistLine(_RowView):
    item: WishlistItem
    product: Product

    _row_attr = "item"


@dataclass
class OrderLine(_RowView):
    item: OrderItem
    product: Product

    _row_attr = "item"


@dataclass
class OrderDetail(_RowView):
    order: Order
    items: List[OrderLine]

    _row_attr = "order"
