"""
Health repository.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select, text

from textile_billing.models.bill import Bill

logger = logging.getLogger(__name__)


class HealthRepository:
    """Database reachability probes."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def check_database(self) -> bool:
        """True when a trivial query round-trips."""
        try:
            result = await self.session.execute(text("SELECT 1"))
            return result.scalar() == 1
        except SQLAlchemyError:
            logger.warning("Database health check failed", exc_info=True)
            return False
    
    async def count_bills(self) -> Optional[int]:
        """Number of stored bills, or None when the table cannot be read."""
        try:
            result = await self.session.execute(select(func.count()).select_from(Bill))
            return result.scalar() or 0
        except SQLAlchemyError:
            logger.warning("Bills table health check failed", exc_info=True)
            return None
