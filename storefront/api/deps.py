"""
API dependencies

Every request gets services bound to its own database session.
"""
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.database import get_db
from storefront.services import (
    AddressService,
    BannerService,
    CartIdentity,
    CartService,
    CatalogService,
    CollectionService,
    NotificationService,
    OrderService,
    ReviewService,
    UserService,
    WishlistService,
)


def get_catalog_service(db: AsyncSession = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


def get_cart_service(db: AsyncSession = Depends(get_db)) -> CartService:
    return CartService(db)


def get_wishlist_service(db: AsyncSession = Depends(get_db)) -> WishlistService:
    return WishlistService(db)


def get_order_service(db: AsyncSession = Depends(get_db)) -> OrderService:
    return OrderService(db)


def get_review_service(db: AsyncSession = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


def get_address_service(db: AsyncSession = Depends(get_db)) -> AddressService:
    return AddressService(db)


def get_banner_service(db: AsyncSession = Depends(get_db)) -> BannerService:
    return BannerService(db)


def get_notification_service(db: AsyncSession = Depends(get_db)) -> NotificationService:
    return NotificationService(db)


def get_collection_service(db: AsyncSession = Depends(get_db)) -> CollectionService:
    return CollectionService(db)


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


def get_cart_identity(
    user_id: Optional[int] = Query(None),
    session_id: Optional[str] = Query(None),
) -> CartIdentity:
    """Identity from the query string; validated by the service that uses it."""
    return CartIdentity(user_id=user_id, session_id=session_id)
