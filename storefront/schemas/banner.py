"""
Banner schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class BannerBase(BaseModel):
    title: str
    subtitle: Optional[str] = None
    image: str
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    is_active: bool = True
    sort_order: int = 0
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class BannerCreate(BannerBase):
    pass


class BannerUpdate(BaseModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    image: Optional[str] = None
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class BannerResponse(BannerBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
