from abc import ABC, abstractmethod

from src.app.repositories.action_event_repository import IActionEventRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    action_events: IActionEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Return True when the underlying store answers a trivial query"""
        pass
