"""
Catalog Service

Categories, products and the product detail view.

Listing rules:
- inactive products never appear, whatever else is filtered
- flags combine with AND
- search is a case-insensitive literal substring over name or description
- newest first (id breaks ties), then offset, then limit
"""
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError
from slugify import slugify
from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import InvalidRequestError, NotFoundError
from storefront.models import Category, Product, Review
from storefront.schemas.product import ProductFilters
from storefront.services.entity_store import EntityStore
from storefront.services.recommendations import FixedSliceRecommender, RecommendationProvider
from storefront.services.views import ProductDetail, Recommendations

logger = logging.getLogger(__name__)

NEWEST_FIRST = (Product.created_at.desc(), Product.id.desc())

FLAG_COLUMNS = {
    "is_new": Product.is_new,
    "is_trending": Product.is_trending,
    "is_featured": Product.is_featured,
    "is_deal": Product.is_deal,
}


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def coerce_filters(filters: Union[ProductFilters, Dict[str, Any], None]) -> ProductFilters:
    if filters is None:
        return ProductFilters()
    if isinstance(filters, ProductFilters):
        return filters
    try:
        return ProductFilters.model_validate(filters)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise InvalidRequestError(f"Invalid product filter: {first['msg']}", field=field) from e


class CatalogService:

    def __init__(self, db: AsyncSession, recommender: Optional[RecommendationProvider] = None):
        self.db = db
        self.products = EntityStore(db, Product)
        self.categories = EntityStore(db, Category)
        self.reviews = EntityStore(db, Review)
        self.recommender = recommender or FixedSliceRecommender()

    # Categories

    async def list_categories(self) -> List[Category]:
        return await self.categories.list(
            Category.is_active == True,
            order_by=(Category.sort_order.asc(), Category.id.asc()),
        )

    async def get_category(self, category_id: int) -> Category:
        return await self.categories.get_or_raise(category_id)

    async def get_category_by_slug(self, slug: str) -> Category:
        category = await self.categories.find_one(Category.slug == slug)
        if category is None:
            raise NotFoundError("Category", slug)
        return category

    async def create_category(self, **fields) -> Category:
        fields["slug"] = await self._resolve_slug(self.categories, Category, fields.get("name"), fields.get("slug"))
        category = await self.categories.create(**fields)
        logger.info(f"Category created: {category.slug} (id={category.id})")
        return category

    async def update_category(self, category_id: int, **partial) -> Category:
        if partial.get("slug"):
            await self._check_slug_free(self.categories, Category, partial["slug"], exclude_id=category_id)
        return await self.categories.update(category_id, **partial)

    # Products

    async def list_products(self, filters: Union[ProductFilters, Dict[str, Any], None] = None) -> List[Product]:
        filters = coerce_filters(filters)
        if filters.limit is not None and filters.limit < 0:
            raise InvalidRequestError("limit must not be negative", field="limit")
        if filters.offset < 0:
            raise InvalidRequestError("offset must not be negative", field="offset")
        if filters.limit == 0:
            return []

        criteria = [Product.is_active == True]
        if filters.category_id is not None:
            criteria.append(Product.category_id == filters.category_id)
        for flag, column in FLAG_COLUMNS.items():
            if getattr(filters, flag):
                criteria.append(column == True)
        if filters.search:
            pattern = f"%{escape_like(filters.search)}%"
            # NULL description yields NULL for that branch, never a match.
            criteria.append(or_(
                Product.name.ilike(pattern, escape="\\"),
                Product.description.ilike(pattern, escape="\\"),
            ))

        return await self.products.list(
            *criteria,
            order_by=NEWEST_FIRST,
            limit=filters.limit,
            offset=filters.offset,
        )

    async def get_product(self, product_id: int) -> Product:
        return await self.products.get_or_raise(product_id)

    async def get_product_by_slug(self, slug: str) -> Product:
        product = await self.products.find_one(Product.slug == slug)
        if product is None:
            raise NotFoundError("Product", slug)
        return product

    async def create_product(self, **fields) -> Product:
        if fields.get("category_id") is not None:
            await self.categories.get_or_raise(fields["category_id"])
        fields["slug"] = await self._resolve_slug(self.products, Product, fields.get("name"), fields.get("slug"))
        product = await self.products.create(**fields)
        logger.info(f"Product created: {product.slug} (id={product.id})")
        return product

    async def update_product(self, product_id: int, **partial) -> Product:
        if partial.get("category_id") is not None:
            await self.categories.get_or_raise(partial["category_id"])
        if partial.get("slug"):
            await self._check_slug_free(self.products, Product, partial["slug"], exclude_id=product_id)
        return await self.products.update(product_id, **partial)

    async def archive_product(self, product_id: int) -> Product:
        product = await self.products.update(product_id, is_active=False)
        logger.info(f"Product archived: {product.slug} (id={product.id})")
        return product

    async def delete_product(self, product_id: int) -> None:
        """Hard delete. Carts or wishlists still holding it fail on their next read."""
        await self.products.delete(product_id)
        logger.info(f"Product deleted: id={product_id}")

    # Detail view

    async def get_product_detail(self, product_id: int) -> ProductDetail:
        return await self._compose_detail(await self.get_product(product_id))

    async def get_product_detail_by_slug(self, slug: str) -> ProductDetail:
        return await self._compose_detail(await self.get_product_by_slug(slug))

    async def get_recommendations(self, product_id: int, kind: str = "also_like") -> List[Product]:
        product = await self.get_product(product_id)
        return await self.recommender.recommend(self.db, product, kind)

    async def _compose_detail(self, product: Product) -> ProductDetail:
        # A dangling category_id is treated like no category.
        category = await self.categories.get(product.category_id)
        reviews = await self.reviews.list(
            Review.product_id == product.id,
            order_by=(Review.created_at.desc(), Review.id.desc()),
        )
        recommendations = Recommendations(
            also_like=await self.recommender.recommend(self.db, product, "also_like"),
            pair_with=await self.recommender.recommend(self.db, product, "pair_with"),
        )
        return ProductDetail(
            product=product,
            category=category,
            reviews=reviews,
            recommendations=recommendations,
        )

    # Slugs

    async def _check_slug_free(self, store: EntityStore, model, slug: str, exclude_id: Optional[int] = None) -> None:
        criteria = [model.slug == slug]
        if exclude_id is not None:
            criteria.append(model.id != exclude_id)
        if await store.find_one(*criteria) is not None:
            raise InvalidRequestError(f"{store.entity_name} slug already in use: {slug}", field="slug")

    async def _resolve_slug(self, store: EntityStore, model, name: Optional[str], slug: Optional[str]) -> str:
        if slug:
            await self._check_slug_free(store, model, slug)
            return slug
        base = slugify(name or "")
        if not base:
            raise InvalidRequestError("A name or slug is required", field="name")
        candidate, counter = base, 2
        while await store.find_one(model.slug == candidate) is not None:
            candidate = f"{base}-{counter}"
            counter += 1
        return candidate
