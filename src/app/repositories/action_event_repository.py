from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple

from src.domain.entities import ActionEvent, ActionType


class IActionEventRepository(ABC):
    """ActionEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, action_event: ActionEvent) -> ActionEvent:
        """Create a new action event (immutable)"""
        pass

    @abstractmethod
    async def summarize_by_action(
        self, user_id: str, since: datetime
    ) -> List[Tuple[ActionType, int, Optional[datetime]]]:
        """
        Aggregate a user's events recorded at or after `since`.

        Returns:
            One (action, count, last_timestamp) row per action type that has
            at least one event in the window. Action types without events
            are absent.
        """
        pass
