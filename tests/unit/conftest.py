import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.ping = AsyncMock(return_value=True)
    # Repository defaults: inserts echo the entity back, aggregations find nothing
    uow.action_events.create = AsyncMock(side_effect=lambda event: event)
    uow.action_events.summarize_by_action = AsyncMock(return_value=[])
    return uow
