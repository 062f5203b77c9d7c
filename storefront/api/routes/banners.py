"""
Banner routes
"""
from typing import List

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_banner_service
from storefront.schemas.banner import BannerCreate, BannerResponse, BannerUpdate
from storefront.services import BannerService

router = APIRouter()


@router.get("", response_model=List[BannerResponse])
async def list_banners(banners: BannerService = Depends(get_banner_service)):
    """Banners currently on air, in carousel order"""
    return await banners.list_banners()


@router.post("", response_model=BannerResponse, status_code=status.HTTP_201_CREATED)
async def create_banner(banner_data: BannerCreate, banners: BannerService = Depends(get_banner_service)):
    return await banners.create_banner(**banner_data.model_dump())


@router.patch("/{banner_id}", response_model=BannerResponse)
async def update_banner(
    banner_id: int,
    banner_data: BannerUpdate,
    banners: BannerService = Depends(get_banner_service),
):
    return await banners.update_banner(banner_id, **banner_data.model_dump(exclude_unset=True))


@router.delete("/{banner_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_banner(banner_id: int, banners: BannerService = Depends(get_banner_service)):
    await banners.delete_banner(banner_id)
