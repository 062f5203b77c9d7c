from storefront.models.user import User
from storefront.models.category import Category
from storefront.models.product import Product
from storefront.models.cart import CartItem
from storefront.models.wishlist import WishlistItem
from storefront.models.order import Order, OrderItem, OrderStatus, PaymentStatus, ORDER_TRANSITIONS
from storefront.models.review import Review
from storefront.models.address import Address
from storefront.models.banner import Banner
from storefront.models.notification import Notification, NotificationType
from storefront.models.collection import Collection
