from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.action_event_repository import IActionEventRepository
from src.app.repositories.errors import StoreError
from src.domain.entities import ActionEvent, ActionType


class ActionEventRepository(IActionEventRepository):
    """ActionEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, action_event: ActionEvent) -> ActionEvent:
        """Create a new action event (immutable)"""
        try:
            self.session.add(action_event)
            await self.session.flush()
            await self.session.refresh(action_event)
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"Failed to insert action event: {exc}") from exc
        return action_event

    async def summarize_by_action(
        self, user_id: str, since: datetime
    ) -> List[Tuple[ActionType, int, Optional[datetime]]]:
        """
        Count events and find the latest timestamp per action in one grouped query.

        The window bound is inclusive: an event stamped exactly at `since` counts.
        """
        stmt = (
            select(
                ActionEvent.action,
                func.count(ActionEvent.id),
                func.max(ActionEvent.timestamp),
            )
            .where(ActionEvent.user_id == user_id)
            .where(ActionEvent.timestamp >= since)
            .group_by(ActionEvent.action)
        )

        try:
            result = await self.session.exec(stmt)
            rows = result.all()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"Failed to aggregate action events: {exc}") from exc

        return [(ActionType(action), count, last_activity) for action, count, last_activity in rows]
