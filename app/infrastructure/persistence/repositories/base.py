"""Base repository: generic lookups plus store error wrapping."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.exceptions import StoreError
from app.infrastructure.persistence.database import Base

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"  # Postgres SQLSTATE

ModelType = TypeVar("ModelType", bound=Base)


def _provider_code(exc: SQLAlchemyError) -> str | None:
    """Postgres SQLSTATE from the driver error when present, else SQLAlchemy's code."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        sqlstate = getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)
        if sqlstate:
            return str(sqlstate)
    return getattr(exc, "code", None)


@contextmanager
def store_errors(operation: str, collection: str) -> Iterator[None]:
    """Re-raise SQLAlchemy errors raised inside the block as StoreError."""
    try:
        yield
    except SQLAlchemyError as exc:
        code = _provider_code(exc)
        logger.error(
            "Store %s on %s failed (code=%s): %s", operation, collection, code, exc
        )
        raise StoreError(operation, collection, str(exc.__class__.__name__), code) from exc


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, create, delete and hooks.

    Every statement runs inside store_errors so callers only ever see
    StoreError. Subclasses map ORM rows to application DTOs.
    """

    collection: str = ""

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get_model_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        with store_errors("select", self.collection):
            result = await self.db.execute(select(self.model).where(model.id == entity_id))
            return result.scalar_one_or_none()

    async def _create(self, obj: ModelType) -> ModelType:
        """Persist a new record and run _on_after_create hook."""
        with store_errors("insert", self.collection):
            self.db.add(obj)
            await self.db.flush()
            await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    async def _delete(self, obj: ModelType) -> None:
        """Run _on_before_delete hook then delete the record."""
        await self._on_before_delete(obj)
        with store_errors("delete", self.collection):
            await self.db.delete(obj)
            await self.db.flush()

    async def _on_after_create(self, obj: ModelType) -> None:
        """Override in subclasses to emit events."""

    async def _on_before_delete(self, obj: ModelType) -> None:
        """Override in subclasses to emit events."""
