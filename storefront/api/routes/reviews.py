"""
Review routes
"""
from typing import List

from fastapi import APIRouter, Depends, Request, status

from storefront.api.deps import get_review_service
from storefront.core.config import settings
from storefront.core.rate_limit import limiter
from storefront.schemas.review import ReviewCreate, ReviewHelpful, ReviewResponse
from storefront.services import ReviewService

router = APIRouter()


@router.get("/{product_id}", response_model=List[ReviewResponse])
async def list_reviews(product_id: int, reviews: ReviewService = Depends(get_review_service)):
    return await reviews.list_reviews(product_id)


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def create_review(
    request: Request,
    review_data: ReviewCreate,
    reviews: ReviewService = Depends(get_review_service),
):
    return await reviews.create_review(**review_data.model_dump())


@router.patch("/{review_id}/helpful", response_model=ReviewResponse)
async def rate_review_helpful(
    review_id: int,
    vote: ReviewHelpful,
    reviews: ReviewService = Depends(get_review_service),
):
    return await reviews.rate_review_helpful(review_id, vote.helpful)
