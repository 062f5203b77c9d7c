"""
Notification routes
"""
from typing import List

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_notification_service
from storefront.schemas.notification import NotificationCreate, NotificationResponse
from storefront.services import NotificationService

router = APIRouter()


@router.get("/{user_id}", response_model=List[NotificationResponse])
async def list_notifications(
    user_id: int,
    unread_only: bool = False,
    notifications: NotificationService = Depends(get_notification_service),
):
    return await notifications.list_notifications(user_id, unread_only=unread_only)


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification_data: NotificationCreate,
    notifications: NotificationService = Depends(get_notification_service),
):
    return await notifications.create_notification(**notification_data.model_dump())


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: int,
    notifications: NotificationService = Depends(get_notification_service),
):
    return await notifications.mark_notification_read(notification_id)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: int,
    notifications: NotificationService = Depends(get_notification_service),
):
    await notifications.delete_notification(notification_id)
