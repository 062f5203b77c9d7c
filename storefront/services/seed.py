"""
Fixture catalog

Loads the demo catalog the storefront ships with: four categories, one product
in each, the two hero banners and an upcoming collection. Seeding is skipped
when any category already exists, so it is safe to run at every startup.
"""
import logging
from datetime import timedelta
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.utils import utcnow
from storefront.models import Banner, Category, Collection, Product
from storefront.services.entity_store import EntityStore

logger = logging.getLogger(__name__)

UNSPLASH = "https://images.unsplash.com"

CATEGORIES = [
    {"name": "Shirts", "slug": "shirts", "image": f"{UNSPLASH}/photo-1596755094514-f87e34085b2c?w=300",
     "description": "Premium shirts collection", "sort_order": 1},
    {"name": "Jeans", "slug": "jeans", "image": f"{UNSPLASH}/photo-1541099649105-f69ad21f3246?w=300",
     "description": "Stylish jeans collection", "sort_order": 2},
    {"name": "T-Shirts", "slug": "t-shirts", "image": f"{UNSPLASH}/photo-1521572163474-6864f9cf17ab?w=300",
     "description": "Casual t-shirts collection", "sort_order": 3},
    {"name": "Accessories", "slug": "accessories", "image": f"{UNSPLASH}/photo-1553062407-98eeb64c6a62?w=300",
     "description": "Fashion accessories", "sort_order": 4},
]

# Keyed to CATEGORIES by slug.
PRODUCTS = [
    {
        "category": "shirts",
        "name": "Classic White Shirt",
        "slug": "classic-white-shirt",
        "description": "Premium cotton white shirt perfect for any occasion",
        "price": Decimal("2499.00"),
        "compare_at_price": Decimal("3499.00"),
        "images": [
            f"{UNSPLASH}/photo-1596755094514-f87e34085b2c?w=600",
            f"{UNSPLASH}/photo-1602810318383-e386cc2a3ccf?w=600",
            f"{UNSPLASH}/photo-1554568218-0f1715e72254?w=600",
        ],
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "colors": ["White", "Light Blue", "Navy"],
        "is_new": True,
        "is_featured": True,
        "stock": 50,
        "rating": Decimal("4.50"),
        "review_count": 28,
        "tags": ["formal", "cotton", "premium"],
    },
    {
        "category": "jeans",
        "name": "Slim Fit Jeans",
        "slug": "slim-fit-jeans",
        "description": "Comfortable slim fit jeans with stretch fabric",
        "price": Decimal("3999.00"),
        "compare_at_price": Decimal("4999.00"),
        "images": [
            f"{UNSPLASH}/photo-1541099649105-f69ad21f3246?w=600",
            f"{UNSPLASH}/photo-1542272604-787c3835535d?w=600",
            f"{UNSPLASH}/photo-1551698618-1dfe5d97d256?w=600",
        ],
        "sizes": ["28", "30", "32", "34", "36", "38"],
        "colors": ["Dark Blue", "Black", "Light Blue"],
        "is_trending": True,
        "is_deal": True,
        "stock": 35,
        "rating": Decimal("4.20"),
        "review_count": 45,
        "tags": ["casual", "stretch", "slim-fit"],
    },
    {
        "category": "t-shirts",
        "name": "Graphic T-Shirt",
        "slug": "graphic-t-shirt",
        "description": "Trendy graphic t-shirt with modern design",
        "price": Decimal("1299.00"),
        "compare_at_price": Decimal("1599.00"),
        "images": [
            f"{UNSPLASH}/photo-1521572163474-6864f9cf17ab?w=600",
            f"{UNSPLASH}/photo-1583743814966-8936f37f4678?w=600",
            f"{UNSPLASH}/photo-1576566588028-4147f3842f27?w=600",
        ],
        "sizes": ["S", "M", "L", "XL"],
        "colors": ["Black", "White", "Navy", "Maroon"],
        "is_new": True,
        "is_trending": True,
        "stock": 75,
        "rating": Decimal("4.80"),
        "review_count": 92,
        "tags": ["casual", "graphic", "trendy"],
    },
    {
        "category": "accessories",
        "name": "Leather Watch",
        "slug": "leather-watch",
        "description": "Elegant leather strap watch with chronograph",
        "price": Decimal("5999.00"),
        "compare_at_price": Decimal("7999.00"),
        "images": [
            f"{UNSPLASH}/photo-1553062407-98eeb64c6a62?w=600",
            f"{UNSPLASH}/photo-1524592094714-0f0654e20314?w=600",
            f"{UNSPLASH}/photo-1606107557195-0e29a4b5b4aa?w=600",
        ],
        "sizes": ["One Size"],
        "colors": ["Brown", "Black", "Tan"],
        "is_featured": True,
        "is_deal": True,
        "stock": 15,
        "rating": Decimal("4.70"),
        "review_count": 23,
        "tags": ["luxury", "leather", "chronograph"],
    },
]

BANNERS = [
    {"title": "NEW COLLECTION", "subtitle": "Elevate Your Style Game",
     "image": f"{UNSPLASH}/photo-1441986300917-64674bd600d8?w=800",
     "button_text": "Shop Now", "button_link": "/products", "sort_order": 1},
    {"title": "SUMMER SALE", "subtitle": "Up to 50% Off",
     "image": f"{UNSPLASH}/photo-1507003211169-0a1dd7228f2d?w=800",
     "button_text": "Shop Sale", "button_link": "/sale", "sort_order": 2},
]

UPCOMING_COLLECTION = {
    "name": "Worth the Wait",
    "slug": "worth-the-wait",
    "description": "Upcoming premium collection dropping soon",
    "image": f"{UNSPLASH}/photo-1556821840-3a63f95609a7?w=600",
    "is_upcoming": True,
}


async def seed_catalog(db: AsyncSession) -> bool:
    """Insert the fixture catalog. Returns False when the store already has one."""
    existing = await db.scalar(select(func.count(Category.id)))
    if existing:
        logger.info(f"Catalog already seeded ({existing} categories), skipping")
        return False

    categories = EntityStore(db, Category)
    products = EntityStore(db, Product)
    banners = EntityStore(db, Banner)
    collections = EntityStore(db, Collection)

    category_ids = {}
    for fields in CATEGORIES:
        category = await categories.create(**fields)
        category_ids[category.slug] = category.id

    for fields in PRODUCTS:
        fields = dict(fields)
        fields["category_id"] = category_ids[fields.pop("category")]
        await products.create(**fields)

    for fields in BANNERS:
        await banners.create(**fields)

    await collections.create(launch_date=utcnow() + timedelta(days=7), **UPCOMING_COLLECTION)

    logger.info(
        f"Seeded fixture catalog: {len(CATEGORIES)} categories, {len(PRODUCTS)} products, "
        f"{len(BANNERS)} banners, 1 collection"
    )
    return True
