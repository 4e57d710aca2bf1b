"""
Data-Access Helpers

Shared plumbing for the storage modules: committing with database errors
mapped to platform errors, refetching rows with their relations, and
applying partial updates.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn.core.errors import BackendError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT")


async def commit(session: AsyncSession, entity: str) -> None:
    """Commit the unit of work, rolling back and translating failures."""
    try:
        await session.commit()
    except IntegrityError as e:
        await session.rollback()
        logger.warning(f"{entity} write rejected by constraint: {e.orig}")
        raise ConflictError(f"{entity} conflicts with existing data") from e
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"{entity} write failed: {e}", exc_info=True)
        raise BackendError(f"Failed to save {entity.lower()}") from e


async def fetch_one(session: AsyncSession, stmt: Select[tuple[RowT]]) -> RowT | None:
    """Run ``stmt`` overwriting any stale identity-map state."""
    result = await session.execute(stmt.execution_options(populate_existing=True))
    return result.scalar_one_or_none()


async def fetch_all(session: AsyncSession, stmt: Select[tuple[RowT]]) -> list[RowT]:
    result = await session.execute(stmt.execution_options(populate_existing=True))
    return list(result.scalars().all())


def require(row: RowT | None, entity: str, key: Any) -> RowT:
    """Return ``row`` or raise NotFoundError."""
    if row is None:
        raise NotFoundError(entity, key)
    return row


def changed_fields(changes: BaseModel) -> dict[str, Any]:
    """Fields the caller actually sent, by attribute name."""
    return changes.model_dump(exclude_unset=True)


def apply_changes(row: Any, values: dict[str, Any]) -> None:
    for field, value in values.items():
        setattr(row, field, value)


async def delete_row(session: AsyncSession, model: type[Any], key: int, entity: str) -> None:
    """Delete by primary key; NotFoundError when the row is missing."""
    row = require(await session.get(model, key), entity, key)
    await session.delete(row)
    await commit(session, entity)
    logger.info(f"{entity} {key} deleted")
