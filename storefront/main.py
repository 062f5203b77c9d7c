"""
Fashion Storefront
FastAPI application entry point

- Catalog, cart, wishlist, order, review and content routes under /api
- Storefront errors mapped to 404/400/409 JSON bodies
- Rate limiting with SlowAPI on order and review writes
- Error sanitization middleware for anything unhandled
- Request id and duration headers on every response
- Health endpoint with DB ping
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from starlette.responses import JSONResponse

from storefront.api.routes import (
    addresses,
    banners,
    cart,
    categories,
    collections,
    notifications,
    orders,
    products,
    recommendations,
    reviews,
    users,
    wishlist,
)
from storefront.core.config import settings
from storefront.core.database import AsyncSessionLocal, get_db_session, init_db
from storefront.core.error_handler import ErrorSanitizationMiddleware, storefront_error_handler
from storefront.core.exceptions import StorefrontError
from storefront.core.rate_limit import limiter, rate_limit_exceeded_handler
from storefront.middleware.request_context import RequestContextMiddleware
from storefront.services.seed import seed_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and load the fixture catalog on startup."""
    await init_db()
    if settings.is_in_memory:
        logger.warning("Using an in-memory database: all data is lost when the process exits")

    if settings.SEED_ON_STARTUP:
        async with get_db_session() as db:
            await seed_catalog(db)
    else:
        logger.info("Fixture catalog seeding DISABLED via config")

    yield

    logger.info(f"{settings.APP_NAME} shutting down")


app = FastAPI(
    lifespan=lifespan,
    title="Fashion Storefront API",
    description="""
## Fashion Storefront API

Catalog, cart and order backend for a fashion e-commerce storefront.

### Features
- **Catalog**: Categories, filtered product listings, product detail with reviews and recommendations
- **Cart**: Guest (session) or user carts
- **Wishlist**: Per-user saved products
- **Orders**: Server-priced orders with a validated status lifecycle
- **Content**: Banners, collections, notifications and saved addresses

### Rate Limits
- Order and review creation: 30 requests/minute
- General: 100 requests/minute
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Health", "description": "Health check endpoints"},
        {"name": "Categories", "description": "Catalog taxonomy"},
        {"name": "Products", "description": "Product catalog and detail views"},
        {"name": "Recommendations", "description": "Related products"},
        {"name": "Cart", "description": "Shopping cart operations"},
        {"name": "Wishlist", "description": "Saved products"},
        {"name": "Orders", "description": "Order creation and lifecycle"},
        {"name": "Reviews", "description": "Product reviews"},
        {"name": "Addresses", "description": "Saved shipping addresses"},
        {"name": "Banners", "description": "Hero carousel banners"},
        {"name": "Notifications", "description": "User notifications"},
        {"name": "Collections", "description": "Curated and upcoming collections"},
        {"name": "Users", "description": "User profiles"},
    ],
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(StorefrontError, storefront_error_handler)

# Catches unhandled exceptions
app.add_middleware(ErrorSanitizationMiddleware)

app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])
app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(recommendations.router, prefix="/api/recommendations", tags=["Recommendations"])
app.include_router(cart.router, prefix="/api/cart", tags=["Cart"])
app.include_router(wishlist.router, prefix="/api/wishlist", tags=["Wishlist"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(reviews.router, prefix="/api/reviews", tags=["Reviews"])
app.include_router(addresses.router, prefix="/api/addresses", tags=["Addresses"])
app.include_router(banners.router, prefix="/api/banners", tags=["Banners"])
app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])
app.include_router(collections.router, prefix="/api/collections", tags=["Collections"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])


@app.get("/", tags=["Health"])
async def root():
    return {
        "message": settings.APP_NAME,
        "version": "1.0.0",
        "status": "operational",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check with an actual DB ping.
    Returns 503 if database is unreachable.
    """
    health_status = {
        "status": "healthy",
        "database": "unknown",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    try:
        async with AsyncSessionLocal() as db:
            await db.execute(text("SELECT 1"))
        health_status["database"] = "connected"
    except Exception as e:
        health_status["database"] = f"error: {type(e).__name__}: {str(e)[:100]}"
        health_status["status"] = "unhealthy"
        return JSONResponse(status_code=503, content=health_status)

    return health_status
