"""
User Service

Users are created explicitly; guest users carry no email.
"""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import InvalidRequestError
from storefront.models import User
from storefront.services.entity_store import EntityStore

logger = logging.getLogger(__name__)


def normalize_email(email: Optional[str]) -> Optional[str]:
    return email.strip().lower() if email else None


class UserService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = EntityStore(db, User)

    async def _check_email_free(self, email: Optional[str], exclude_id: Optional[int] = None) -> None:
        if not email:
            return
        criteria = [User.email == email]
        if exclude_id is not None:
            criteria.append(User.id != exclude_id)
        if await self.users.find_one(*criteria) is not None:
            raise InvalidRequestError("Email already registered", field="email")

    async def get_user(self, user_id: int) -> User:
        return await self.users.get_or_raise(user_id)

    async def create_user(self, **fields) -> User:
        fields["email"] = normalize_email(fields.get("email"))
        if fields["email"] is None:
            fields["is_guest"] = True
        await self._check_email_free(fields["email"])
        user = await self.users.create(**fields)
        logger.info(f"User created: id={user.id} guest={user.is_guest}")
        return user

    async def update_user(self, user_id: int, **partial) -> User:
        if "email" in partial:
            partial["email"] = normalize_email(partial["email"])
            await self._check_email_free(partial["email"], exclude_id=user_id)
        return await self.users.update(user_id, **partial)
