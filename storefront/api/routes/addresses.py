"""
Address routes
"""
from typing import List

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_address_service
from storefront.schemas.address import AddressCreate, AddressResponse, AddressUpdate
from storefront.services import AddressService

router = APIRouter()


@router.get("/{user_id}", response_model=List[AddressResponse])
async def list_addresses(user_id: int, addresses: AddressService = Depends(get_address_service)):
    """Saved addresses, default first"""
    return await addresses.list_addresses(user_id)


@router.post("", response_model=AddressResponse, status_code=status.HTTP_201_CREATED)
async def create_address(
    address_data: AddressCreate,
    addresses: AddressService = Depends(get_address_service),
):
    fields = address_data.model_dump()
    return await addresses.create_address(fields.pop("user_id"), **fields)


@router.patch("/{address_id}", response_model=AddressResponse)
async def update_address(
    address_id: int,
    address_data: AddressUpdate,
    addresses: AddressService = Depends(get_address_service),
):
    return await addresses.update_address(address_id, **address_data.model_dump(exclude_unset=True))


@router.delete("/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(address_id: int, addresses: AddressService = Depends(get_address_service)):
    await addresses.delete_address(address_id)
