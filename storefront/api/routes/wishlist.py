"""
Wishlist routes
"""
from typing import List

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_wishlist_service
from storefront.schemas.wishlist import WishlistItemCreate, WishlistItemResponse, WishlistLineResponse
from storefront.services import WishlistService

router = APIRouter()


@router.get("/{user_id}", response_model=List[WishlistLineResponse])
async def get_wishlist(user_id: int, wishlist: WishlistService = Depends(get_wishlist_service)):
    return await wishlist.get_wishlist(user_id)


@router.post("", response_model=WishlistItemResponse, status_code=status.HTTP_201_CREATED)
async def add_to_wishlist(
    item_data: WishlistItemCreate,
    wishlist: WishlistService = Depends(get_wishlist_service),
):
    return await wishlist.add_to_wishlist(item_data.user_id, item_data.product_id)


@router.delete("/{user_id}/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_from_wishlist(
    user_id: int,
    product_id: int,
    wishlist: WishlistService = Depends(get_wishlist_service),
):
    await wishlist.remove_from_wishlist(user_id, product_id)
