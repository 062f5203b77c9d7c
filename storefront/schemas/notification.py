"""
Notification schemas
"""
from datetime import datetime
from typing import Optional, Dict, Any
from pydantic import BaseModel

from storefront.models.notification import NotificationType


class NotificationCreate(BaseModel):
    user_id: Optional[int] = None
    title: str
    message: str
    type: NotificationType
    data: Optional[Dict[str, Any]] = None


class NotificationResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    title: str
    message: str
    type: str
    is_read: bool
    data: Optional[Dict[str, Any]] = None
    created_at: datetime

    class Config:
        from_attributes = True
