"""
Collection routes
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_collection_service
from storefront.schemas.collection import CollectionCreate, CollectionResponse, CollectionUpdate
from storefront.services import CollectionService

router = APIRouter()


@router.get("", response_model=List[CollectionResponse])
async def list_collections(
    upcoming: Optional[bool] = None,
    collections: CollectionService = Depends(get_collection_service),
):
    return await collections.list_collections(upcoming=upcoming)


@router.get("/slug/{slug}", response_model=CollectionResponse)
async def get_collection_by_slug(slug: str, collections: CollectionService = Depends(get_collection_service)):
    return await collections.get_collection_by_slug(slug)


@router.get("/{collection_id}", response_model=CollectionResponse)
async def get_collection(collection_id: int, collections: CollectionService = Depends(get_collection_service)):
    return await collections.get_collection(collection_id)


@router.post("", response_model=CollectionResponse, status_code=status.HTTP_201_CREATED)
async def create_collection(
    collection_data: CollectionCreate,
    collections: CollectionService = Depends(get_collection_service),
):
    return await collections.create_collection(**collection_data.model_dump())


@router.patch("/{collection_id}", response_model=CollectionResponse)
async def update_collection(
    collection_id: int,
    collection_data: CollectionUpdate,
    collections: CollectionService = Depends(get_collection_service),
):
    return await collections.update_collection(collection_id, **collection_data.model_dump(exclude_unset=True))


@router.delete("/{collection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_collection(collection_id: int, collections: CollectionService = Depends(get_collection_service)):
    await collections.delete_collection(collection_id)
