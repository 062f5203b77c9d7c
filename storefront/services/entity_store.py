"""
EntityStore - keyed CRUD over one model

Every service builds its stores from the session it was handed, so a fresh
session (or a fresh in-memory engine in tests) is a fresh store.

Contract:
    create(**fields)      -> row with id, created_at/updated_at stamped
    get(id)               -> row or None
    get_or_raise(id)      -> row, NotFoundError when absent
    update(id, **partial) -> row, NotFoundError when absent, InvalidRequestError
                             when a NOT NULL column is set to None, updated_at stamped
    delete(id)            -> None, idempotent
    list(*criteria)       -> rows
"""
import logging
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import delete as sa_delete, inspect as sa_inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import DataIntegrityError, InvalidRequestError, NotFoundError
from storefront.core.utils import utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# Assigned by the store, never by callers.
MANAGED_COLUMNS = frozenset({"id", "created_at", "updated_at"})


class EntityStore(Generic[ModelT]):

    def __init__(self, db: AsyncSession, model: Type[ModelT], entity_name: Optional[str] = None):
        self.db = db
        self.model = model
        self.entity_name = entity_name or model.__name__
        self._columns = frozenset(attr.key for attr in sa_inspect(model).column_attrs)
        self._required = frozenset(
            attr.key for attr in sa_inspect(model).column_attrs if not attr.columns[0].nullable
        ) - MANAGED_COLUMNS

    def _check_fields(self, fields: Dict[str, Any]) -> None:
        unknown = set(fields) - (self._columns - MANAGED_COLUMNS)
        if unknown:
            raise InvalidRequestError(
                f"Unknown or read-only {self.entity_name} fields: {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )

    def _check_not_null(self, fields: Dict[str, Any]) -> None:
        nulled = sorted(field for field, value in fields.items() if value is None and field in self._required)
        if nulled:
            raise InvalidRequestError(
                f"{self.entity_name} fields cannot be null: {', '.join(nulled)}",
                field=nulled[0],
            )

    def _stamp(self, row: ModelT, created: bool) -> None:
        now = utcnow()
        if created and "created_at" in self._columns:
            row.created_at = now
        if "updated_at" in self._columns:
            row.updated_at = now

    async def _flush(self) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"{self.entity_name} write rejected by a database constraint: {e.orig}")
            raise DataIntegrityError(
                f"{self.entity_name} write violates a database constraint",
                entity=self.entity_name,
            ) from e

    async def create(self, **fields) -> ModelT:
        self._check_fields(fields)
        row = self.model(**fields)
        self._stamp(row, created=True)
        self.db.add(row)
        await self._flush()
        return row

    async def get(self, entity_id: Any) -> Optional[ModelT]:
        if entity_id is None:
            return None
        return await self.db.get(self.model, entity_id)

    async def get_or_raise(self, entity_id: Any) -> ModelT:
        row = await self.get(entity_id)
        if row is None:
            raise NotFoundError(self.entity_name, entity_id)
        return row

    async def find_one(self, *criteria) -> Optional[ModelT]:
        result = await self.db.execute(select(self.model).where(*criteria).limit(1))
        return result.scalars().first()

    async def get_many(self, ids: Iterable[Any]) -> Dict[Any, ModelT]:
        """Fetch rows by id in one query; missing ids are simply absent from the map."""
        ids = set(ids)
        if not ids:
            return {}
        result = await self.db.execute(select(self.model).where(self.model.id.in_(ids)))
        return {row.id: row for row in result.scalars().all()}

    async def update(self, entity_id: Any, **partial) -> ModelT:
        self._check_fields(partial)
        self._check_not_null(partial)
        row = await self.get_or_raise(entity_id)
        for field, value in partial.items():
            setattr(row, field, value)
        self._stamp(row, created=False)
        await self._flush()
        return row

    async def delete(self, entity_id: Any) -> None:
        row = await self.get(entity_id)
        if row is None:
            return
        await self.db.delete(row)
        await self._flush()

    async def delete_where(self, *criteria) -> int:
        result = await self.db.execute(
            sa_delete(self.model).where(*criteria).execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0

    async def list(
        self,
        *criteria,
        order_by: Iterable = (),
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[ModelT]:
        query = select(self.model)
        if criteria:
            query = query.where(*criteria)
        order_by = tuple(order_by)
        if order_by:
            query = query.order_by(*order_by)
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())
