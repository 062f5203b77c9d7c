"""
Collection schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class CollectionBase(BaseModel):
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    is_upcoming: bool = False
    launch_date: Optional[datetime] = None
    is_active: bool = True


class CollectionCreate(CollectionBase):
    slug: Optional[str] = None  # generated from name when omitted


class CollectionUpdate(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    is_upcoming: Optional[bool] = None
    launch_date: Optional[datetime] = None
    is_active: Optional[bool] = None


class CollectionResponse(CollectionBase):
    id: int
    slug: str
    created_at: datetime

    class Config:
        from_attributes = True
