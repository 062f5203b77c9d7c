"""
Collection Service
"""
from typing import List, Optional

from slugify import slugify
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import InvalidRequestError, NotFoundError
from storefront.models import Collection
from storefront.services.entity_store import EntityStore


class CollectionService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.collections = EntityStore(db, Collection)

    async def list_collections(self, upcoming: Optional[bool] = None) -> List[Collection]:
        criteria = [Collection.is_active == True]
        if upcoming is not None:
            criteria.append(Collection.is_upcoming == upcoming)
        return await self.collections.list(
            *criteria,
            order_by=(Collection.created_at.desc(), Collection.id.desc()),
        )

    async def get_collection(self, collection_id: int) -> Collection:
        return await self.collections.get_or_raise(collection_id)

    async def get_collection_by_slug(self, slug: str) -> Collection:
        collection = await self.collections.find_one(Collection.slug == slug)
        if collection is None:
            raise NotFoundError("Collection", slug)
        return collection

    async def create_collection(self, **fields) -> Collection:
        slug = fields.get("slug") or slugify(fields.get("name") or "")
        if not slug:
            raise InvalidRequestError("A name or slug is required", field="name")
        if await self.collections.find_one(Collection.slug == slug) is not None:
            raise InvalidRequestError(f"Collection slug already in use: {slug}", field="slug")
        fields["slug"] = slug
        return await self.collections.create(**fields)

    async def update_collection(self, collection_id: int, **partial) -> Collection:
        if partial.get("slug"):
            clash = await self.collections.find_one(
                Collection.slug == partial["slug"],
                Collection.id != collection_id,
            )
            if clash is not None:
                raise InvalidRequestError(f"Collection slug already in use: {partial['slug']}", field="slug")
        return await self.collections.update(collection_id, **partial)

    async def delete_collection(self, collection_id: int) -> None:
        await self.collections.get_or_raise(collection_id)
        await self.collections.delete(collection_id)
