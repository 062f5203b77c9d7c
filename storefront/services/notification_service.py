"""
Notification Service
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import InvalidRequestError
from storefront.models import Notification, NotificationType
from storefront.services.entity_store import EntityStore

logger = logging.getLogger(__name__)


class NotificationService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.notifications = EntityStore(db, Notification)

    async def list_notifications(self, user_id: int, unread_only: bool = False) -> List[Notification]:
        criteria = [Notification.user_id == user_id]
        if unread_only:
            criteria.append(Notification.is_read == False)
        return await self.notifications.list(
            *criteria,
            order_by=(Notification.created_at.desc(), Notification.id.desc()),
        )

    async def create_notification(
        self,
        title: str,
        message: str,
        type: NotificationType,
        user_id: Optional[int] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Notification:
        try:
            kind = NotificationType(type)
        except ValueError:
            raise InvalidRequestError(f"Unknown notification type: {type}", field="type")
        notification = await self.notifications.create(
            user_id=user_id,
            title=title,
            message=message,
            type=kind.value,
            data=data,
        )
        logger.debug(f"Notification {notification.id} ({notification.type}) for user {user_id}")
        return notification

    async def mark_notification_read(self, notification_id: int) -> Notification:
        return await self.notifications.update(notification_id, is_read=True)

    async def delete_notification(self, notification_id: int) -> None:
        await self.notifications.get_or_raise(notification_id)
        await self.notifications.delete(notification_id)
