"""
Category routes
"""
from typing import List

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_catalog_service
from storefront.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from storefront.services import CatalogService

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def list_categories(catalog: CatalogService = Depends(get_catalog_service)):
    """Active categories in display order"""
    return await catalog.list_categories()


@router.get("/{slug}", response_model=CategoryResponse)
async def get_category(slug: str, catalog: CatalogService = Depends(get_catalog_service)):
    return await catalog.get_category_by_slug(slug)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    return await catalog.create_category(**category_data.model_dump())


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    return await catalog.update_category(category_id, **category_data.model_dump(exclude_unset=True))
