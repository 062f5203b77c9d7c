"""
Cart/wishlist owner resolution

A cart belongs either to a registered user or to an anonymous guest session.
New rows store exactly one key (the user id wins when both are known); reads
match rows owned by either key so a guest cart stays visible once the caller
also presents a user id.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from sqlalchemy import or_

from storefront.core.exceptions import InvalidRequestError


@dataclass(frozen=True)
class CartIdentity:
    user_id: Optional[int] = None
    session_id: Optional[str] = None

    @property
    def has_user(self) -> bool:
        return self.user_id is not None

    @property
    def has_session(self) -> bool:
        return bool(self.session_id)

    @property
    def is_empty(self) -> bool:
        return not self.has_user and not self.has_session

    def require(self) -> "CartIdentity":
        if self.is_empty:
            raise InvalidRequestError("userId or sessionId required", field="user_id")
        return self

    def owner_columns(self) -> Dict[str, Any]:
        """Columns written on a new row: exactly one identity key."""
        self.require()
        if self.has_user:
            return {"user_id": self.user_id, "session_id": None}
        return {"user_id": None, "session_id": self.session_id}

    def matches(self, model):
        """SQL criterion selecting rows owned by either key."""
        self.require()
        criteria = []
        if self.has_user:
            criteria.append(model.user_id == self.user_id)
        if self.has_session:
            criteria.append(model.session_id == self.session_id)
        return or_(*criteria)


def require_user_id(user_id: Optional[int]) -> int:
    """Wishlists need an authenticated identity; guest sessions are not enough."""
    if user_id is None:
        raise InvalidRequestError("userId required", field="user_id")
    return user_id
