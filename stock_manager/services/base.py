import logging
from contextlib import asynccontextmanager

from ..exceptions import StockManagerError
from ..repositories import UnitOfWork

logger = logging.getLogger(__name__)


class BaseService:
    """Service bound to the unit of work of one request"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @asynccontextmanager
    async def transaction(self, action: str):
        """Commit on success, roll back and re-raise on any error"""
        try:
            yield
            await self.uow.commit()
        except StockManagerError as e:
            await self.uow.rollback()
            logger.warning(f"⚠️ Could not {action}: {e.message}")
            raise
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"❌ Error trying to {action}: {e}")
            raise
