"""
Product routes
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from storefront.api.deps import get_catalog_service
from storefront.core.config import settings
from storefront.schemas.product import (
    ProductCreate,
    ProductDetailResponse,
    ProductFilters,
    ProductResponse,
    ProductUpdate,
)
from storefront.services import CatalogService

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
async def list_products(
    category_id: Optional[int] = None,
    is_new: bool = False,
    is_trending: bool = False,
    is_featured: bool = False,
    is_deal: bool = False,
    search: Optional[str] = None,
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, le=settings.MAX_PAGE_SIZE),
    offset: int = 0,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """List active products, newest first"""
    filters = ProductFilters(
        category_id=category_id,
        is_new=is_new,
        is_trending=is_trending,
        is_featured=is_featured,
        is_deal=is_deal,
        search=search,
        limit=limit,
        offset=offset,
    )
    return await catalog.list_products(filters)


@router.get("/slug/{slug}", response_model=ProductDetailResponse)
async def get_product_by_slug(slug: str, catalog: CatalogService = Depends(get_catalog_service)):
    return await catalog.get_product_detail_by_slug(slug)


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(product_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    """Product with its category, reviews and recommendations"""
    return await catalog.get_product_detail(product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    return await catalog.create_product(**product_data.model_dump())


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_data: ProductUpdate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    return await catalog.update_product(product_id, **product_data.model_dump(exclude_unset=True))


@router.post("/{product_id}/archive", response_model=ProductResponse)
async def archive_product(product_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    """Hide a product from listings, keeping order history intact"""
    return await catalog.archive_product(product_id)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, catalog: CatalogService = Depends(get_catalog_service)):
    await catalog.delete_product(product_id)
