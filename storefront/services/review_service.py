"""
Review Service

Creating a review folds its rating into the product's running average.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import InvalidRequestError, NotFoundError
from storefront.models import Product, Review, User
from storefront.services.entity_store import EntityStore

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class ReviewService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.reviews = EntityStore(db, Review)
        self.products = EntityStore(db, Product)
        self.users = EntityStore(db, User)

    async def list_reviews(self, product_id: int) -> List[Review]:
        return await self.reviews.list(
            Review.product_id == product_id,
            order_by=(Review.created_at.desc(), Review.id.desc()),
        )

    async def create_review(
        self,
        user_id: int,
        product_id: int,
        rating: int,
        order_id: Optional[int] = None,
        title: Optional[str] = None,
        comment: Optional[str] = None,
        images: Optional[List[str]] = None,
        is_verified: bool = False,
    ) -> Review:
        if rating is None or not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidRequestError(
                f"rating must be between {MIN_RATING} and {MAX_RATING}",
                field="rating",
            )
        product = await self.products.get_or_raise(product_id)
        if await self.users.get(user_id) is None:
            raise NotFoundError("User", user_id)

        review = await self.reviews.create(
            user_id=user_id,
            product_id=product_id,
            order_id=order_id,
            rating=rating,
            title=title,
            comment=comment,
            images=images or [],
            is_verified=is_verified,
        )

        count = (product.review_count or 0) + 1
        average = (Decimal(str(product.rating or 0)) * (count - 1) + rating) / count
        await self.products.update(
            product.id,
            review_count=count,
            rating=average.quantize(Decimal("0.01")),
        )
        logger.info(f"Review {review.id} on product {product_id}: {rating}/5 (now {count} reviews)")
        return review

    async def rate_review_helpful(self, review_id: int, helpful: bool) -> Review:
        review = await self.reviews.get_or_raise(review_id)
        delta = 1 if helpful else -1
        return await self.reviews.update(
            review_id,
            helpful_count=max((review.helpful_count or 0) + delta, 0),
        )
