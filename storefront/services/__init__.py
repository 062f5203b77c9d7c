"""
Storefront services

Each service is constructed around the AsyncSession it should use; nothing is
shared between instances beyond the database itself.
"""
from storefront.services.entity_store import EntityStore
from storefront.services.identity import CartIdentity
from storefront.services.catalog_service import CatalogService
from storefront.services.cart_service import CartService
from storefront.services.wishlist_service import WishlistService
from storefront.services.order_service import OrderService
from storefront.services.review_service import ReviewService
from storefront.services.address_service import AddressService
from storefront.services.banner_service import BannerService
from storefront.services.notification_service import NotificationService
from storefront.services.collection_service import CollectionService
from storefront.services.user_service import UserService
