"""
Notification model
"""
import enum

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, DateTime, Text, JSON

from storefront.core.database import Base
from storefront.core.utils import utcnow


class NotificationType(str, enum.Enum):
    NEW_ARRIVAL = "new_arrival"
    DISCOUNT = "discount"
    RESTOCK = "restock"
    ORDER_UPDATE = "order_update"


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)  # null = broadcast
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    data = Column(JSON)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
