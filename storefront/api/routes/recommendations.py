"""
Recommendation routes
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from storefront.api.deps import get_catalog_service
from storefront.schemas.product import ProductResponse
from storefront.services import CatalogService

router = APIRouter()


@router.get("/{product_id}", response_model=List[ProductResponse])
async def get_recommendations(
    product_id: int,
    kind: str = Query("also_like", alias="type"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return await catalog.get_recommendations(product_id, kind)
