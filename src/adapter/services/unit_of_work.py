import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.action_event_repository import ActionEventRepository
from src.app.repositories.errors import StoreError
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.action_events = ActionEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"Failed to commit transaction: {exc}") from exc

    async def rollback(self):
        try:
            await self.session.rollback()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"Failed to roll back transaction: {exc}") from exc

    async def ping(self) -> bool:
        try:
            connection = await self.session.connection()
            await connection.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            logger.warning(f"Store ping failed: {exc}")
            return False
        return True
