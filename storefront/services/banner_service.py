"""
Banner Service
"""
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.utils import utcnow
from storefront.models import Banner
from storefront.services.entity_store import EntityStore

WINDOW_FIELDS = ("start_date", "end_date")


def to_utc(value: datetime) -> datetime:
    """Naive values are taken as UTC; SQLite stores the wall clock without an offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _normalize_window(fields: Dict[str, Any]) -> Dict[str, Any]:
    for name in WINDOW_FIELDS:
        if fields.get(name) is not None:
            fields[name] = to_utc(fields[name])
    return fields


class BannerService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.banners = EntityStore(db, Banner)

    async def list_banners(self) -> List[Banner]:
        """Active banners whose window contains now; a null bound is open."""
        now = utcnow()
        return await self.banners.list(
            Banner.is_active == True,
            or_(Banner.start_date.is_(None), Banner.start_date <= now),
            or_(Banner.end_date.is_(None), Banner.end_date >= now),
            order_by=(Banner.sort_order.asc(), Banner.id.asc()),
        )

    async def create_banner(self, **fields) -> Banner:
        return await self.banners.create(**_normalize_window(fields))

    async def update_banner(self, banner_id: int, **partial) -> Banner:
        return await self.banners.update(banner_id, **_normalize_window(partial))

    async def delete_banner(self, banner_id: int) -> None:
        await self.banners.get_or_raise(banner_id)
        await self.banners.delete(banner_id)
