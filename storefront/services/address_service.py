"""
Address Service

At most one default address per user: marking one default clears the flag on
the user's others.
"""
import logging
from typing import List

from sqlalchemy import update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import NotFoundError
from storefront.models import Address, User
from storefront.services.entity_store import EntityStore

logger = logging.getLogger(__name__)


class AddressService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.addresses = EntityStore(db, Address)
        self.users = EntityStore(db, User)

    async def _clear_defaults(self, user_id: int, keep_id: int) -> None:
        await self.db.execute(
            sa_update(Address)
            .where(Address.user_id == user_id, Address.id != keep_id, Address.is_default == True)
            .values(is_default=False)
            .execution_options(synchronize_session="fetch")
        )

    async def list_addresses(self, user_id: int) -> List[Address]:
        return await self.addresses.list(
            Address.user_id == user_id,
            order_by=(Address.is_default.desc(), Address.created_at.desc(), Address.id.desc()),
        )

    async def create_address(self, user_id: int, **fields) -> Address:
        if await self.users.get(user_id) is None:
            raise NotFoundError("User", user_id)
        address = await self.addresses.create(user_id=user_id, **fields)
        if address.is_default:
            await self._clear_defaults(user_id, address.id)
        return address

    async def update_address(self, address_id: int, **partial) -> Address:
        address = await self.addresses.update(address_id, **partial)
        if partial.get("is_default"):
            await self._clear_defaults(address.user_id, address.id)
        return address

    async def delete_address(self, address_id: int) -> None:
        await self.addresses.get_or_raise(address_id)
        await self.addresses.delete(address_id)
