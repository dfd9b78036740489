"""Base repository with common CRUD operations."""

from typing import Any, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from herald.db.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository:
    """Generic async repository for SQLAlchemy models."""

    def __init__(self, session: AsyncSession, model_class: type[T]):
        self.session = session
        self.model_class = model_class

    async def get_by_id(self, pk_field: str, pk_value: str) -> T | None:
        """Get a single record by primary key."""
        stmt = select(self.model_class).where(
            getattr(self.model_class, pk_field) == pk_value
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, **kwargs: Any) -> T:
        """Create and persist a new record."""
        row = self.model_class(**kwargs)
        self.session.add(row)
        await self.session.flush()
        return row

    async def update(self, row: T, **kwargs: Any) -> T:
        """Update an existing record."""
        for key, value in kwargs.items():
            setattr(row, key, value)
        await self.session.flush()
        return row

    async def list_by_field(self, field: str, value: Any, order_by=None) -> list[T]:
        """List records matching a field value."""
        stmt = select(self.model_class).where(
            getattr(self.model_class, field) == value
        )
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_all(self, order_by=None) -> list[T]:
        stmt = select(self.model_class)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_id(self, pk_field: str, pk_value: str) -> bool:
        """Delete a record by primary key; an absent key is a no-op."""
        row = await self.get_by_id(pk_field, pk_value)
        if row is None:
            return False
        await self.session.delete(row)
        await self.session.flush()
        return True

    async def delete_by_field(self, field: str, values: Any) -> int:
        """Bulk delete records whose field matches a value or any of a list of values."""
        column = getattr(self.model_class, field)
        if isinstance(values, (list, tuple, set)):
            if not values:
                return 0
            clause = column.in_(list(values))
        else:
            clause = column == values
        result = await self.session.execute(delete(self.model_class).where(clause))
        return result.rowcount
