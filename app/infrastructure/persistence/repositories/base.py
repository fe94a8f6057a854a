"""Base repository: generic CRUD keyed on each model's own primary key column."""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, exists, get_all, count, create, update.

    The primary key column is read from the mapper, so org_id / event_id /
    ticket_id models share one implementation. Subclasses map rows to DTOs.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model
        self._pk = sa_inspect(model).primary_key[0]

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        return await self._load(entity_id)

    async def _load(self, entity_id: str) -> ModelType | None:
        """ORM row by primary key; subclasses that return DTOs from get_by_id still use this."""
        result = await self.db.execute(select(self.model).where(self._pk == entity_id))
        return result.scalar_one_or_none()

    async def exists(self, entity_id: str) -> bool:
        """Return whether a record with this primary key exists."""
        result = await self.db.execute(select(self._pk).where(self._pk == entity_id))
        return result.first() is not None

    async def get_all(self) -> list[ModelType]:
        """Return every record ordered by creation time, then primary key."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).order_by(model.created_at.asc(), self._pk.asc())
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        """Return the number of records."""
        result = await self.db.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and reload server-generated columns."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached record and reload it."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def apply_changes(
        self, entity_id: str, changes: dict[str, Any], allowed: set[str]
    ) -> ModelType | None:
        """Load by id, set the allowed keys present in changes, and flush.

        Returns None when the record does not exist. Unknown keys are ignored.
        """
        entity = await self._load(entity_id)
        if entity is None:
            return None
        for key in allowed:
            if key in changes:
                setattr(entity, key, changes[key])
        return await self.update(entity)
