"""
Cart routes

Carts are addressed by user_id or session_id; guests only have the latter.
"""
from fastapi import APIRouter, Depends, Response, status

from storefront.api.deps import get_cart_identity, get_cart_service
from storefront.schemas.cart import CartItemCreate, CartItemResponse, CartItemUpdate, CartResponse
from storefront.services import CartIdentity, CartService

router = APIRouter()


@router.get("", response_model=CartResponse)
async def get_cart(
    identity: CartIdentity = Depends(get_cart_identity),
    cart: CartService = Depends(get_cart_service),
):
    """Cart lines with their products, plus subtotal"""
    return await cart.get_cart(identity)


@router.post("", response_model=CartItemResponse, status_code=status.HTTP_201_CREATED)
async def add_to_cart(item_data: CartItemCreate, cart: CartService = Depends(get_cart_service)):
    return await cart.add_to_cart(
        CartIdentity(user_id=item_data.user_id, session_id=item_data.session_id),
        product_id=item_data.product_id,
        quantity=item_data.quantity,
        size=item_data.size,
        color=item_data.color,
    )


@router.patch("/{item_id}", response_model=CartItemResponse)
async def update_cart_item(
    item_id: int,
    update_data: CartItemUpdate,
    cart: CartService = Depends(get_cart_service),
):
    """Set quantity; anything below 1 removes the line"""
    if update_data.quantity < 1:
        await cart.remove_from_cart(item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return await cart.update_cart_quantity(item_id, update_data.quantity)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_from_cart(item_id: int, cart: CartService = Depends(get_cart_service)):
    await cart.remove_from_cart(item_id)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cart(
    identity: CartIdentity = Depends(get_cart_identity),
    cart: CartService = Depends(get_cart_service),
):
    await cart.clear_cart(identity)
