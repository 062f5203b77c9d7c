"""
User routes

No authentication: user ids are taken at face value.
"""
from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_user_service
from storefront.schemas.user import UserCreate, UserResponse, UserUpdate
from storefront.services import UserService

router = APIRouter()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    return await users.get_user(user_id)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, users: UserService = Depends(get_user_service)):
    return await users.create_user(**user_data.model_dump())


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    update_data: UserUpdate,
    users: UserService = Depends(get_user_service),
):
    return await users.update_user(user_id, **update_data.model_dump(exclude_unset=True))
