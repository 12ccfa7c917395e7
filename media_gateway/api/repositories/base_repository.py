from typing import Any, List, Optional

from loguru import logger as custom_logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from media_gateway.api.exceptions import CatalogUnavailable, CatalogWriteFailed, NotFoundError


class CatalogRepository:
    """Single-statement access to the catalog.

    Reads raise NotFoundError on a miss and CatalogUnavailable when the
    database cannot answer. Inserts run one INSERT ... RETURNING statement
    and commit it, raising CatalogWriteFailed on any failure.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _insert_returning(self, stmt: Executable) -> Any:
        try:
            result = await self.session.execute(stmt)
            row = result.scalar_one()
            await self.session.commit()
            return row
        except (SQLAlchemyError, OSError) as e:
            custom_logger.error(f"Catalog insert failed: {str(e)}")
            await self._safe_rollback()
            raise CatalogWriteFailed(str(e)) from e

    async def _fetch_all(self, stmt: Executable) -> List[Any]:
        try:
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as e:
            custom_logger.error(f"Catalog read failed: {str(e)}")
            raise CatalogUnavailable(str(e)) from e

    async def _fetch_first(self, stmt: Executable, not_found: str) -> Any:
        try:
            result = await self.session.execute(stmt)
            row: Optional[Any] = result.scalars().first()
        except (SQLAlchemyError, OSError) as e:
            custom_logger.error(f"Catalog read failed: {str(e)}")
            raise CatalogUnavailable(str(e)) from e

        if row is None:
            raise NotFoundError(not_found)
        return row

    async def _safe_rollback(self) -> None:
        try:
            await self.session.rollback()
        except (SQLAlchemyError, OSError) as e:
            custom_logger.warning(f"Rollback after failed insert also failed: {e}")
