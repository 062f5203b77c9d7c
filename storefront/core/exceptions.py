"""
Storefront Exception Hierarchy

Every failure the catalog, cart and order services raise is one of three kinds
so the API layer can map them to status codes deterministically.

Exception Hierarchy:
    StorefrontError
    ├── NotFoundError          referenced entity id does not exist
    ├── InvalidRequestError    missing identity key, bad quantity/rating/filter
    └── DataIntegrityError     a join hit a missing target row
"""
from typing import Optional, Dict, Any


class StorefrontError(Exception):
    """
    Base exception for all storefront errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        details: Additional context for debugging
    """

    default_code: str = "STOREFRONT_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class NotFoundError(StorefrontError):
    """A referenced entity does not exist."""
    default_code = "NOT_FOUND"
    status_code = 404

    def __init__(
        self,
        entity: str,
        entity_id: Any = None,
        message: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details.update({"entity": entity, "id": entity_id})
        super().__init__(message or f"{entity} not found", details=details, **kwargs)
        self.entity = entity
        self.entity_id = entity_id


class InvalidRequestError(StorefrontError):
    """Caller input violates a contract (identity, quantity, rating, filter)."""
    default_code = "INVALID_REQUEST"
    status_code = 400

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if field is not None:
            details["field"] = field
        super().__init__(message, details=details, **kwargs)
        self.field = field


class DataIntegrityError(StorefrontError):
    """A stored reference points at a row that no longer exists."""
    default_code = "DATA_INTEGRITY"
    status_code = 409

    def __init__(
        self,
        message: str,
        entity: Optional[str] = None,
        entity_id: Any = None,
        missing: Optional[str] = None,
        missing_id: Any = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details.update({
            "entity": entity,
            "id": entity_id,
            "missing": missing,
            "missing_id": missing_id,
        })
        super().__init__(message, details=details, **kwargs)
