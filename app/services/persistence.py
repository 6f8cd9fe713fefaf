"""Flush helper that turns storage failures into PersistenceError."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import PersistenceError

logger = logging.getLogger(__name__)


async def flush(db: AsyncSession, action: str) -> None:
    """Flush pending changes; no retry, the request transaction is rolled back by get_db."""
    try:
        await db.flush()
    except SQLAlchemyError as e:
        logger.exception("Failed to %s", action)
        raise PersistenceError(f"Failed to {action}", original_error=e) from e


async def commit(db: AsyncSession, action: str) -> None:
    """Commit now instead of after the response, for callers that must know it stuck."""
    try:
        await db.commit()
    except SQLAlchemyError as e:
        logger.exception("Failed to %s", action)
        raise PersistenceError(f"Failed to {action}", original_error=e) from e
