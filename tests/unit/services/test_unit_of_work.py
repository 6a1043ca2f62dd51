"""
Unit tests for SqlAlchemyUnitOfWork error translation
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import OperationalError

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.repositories.errors import StoreError


def _failing_session(method: str):
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    setattr(
        session,
        method,
        AsyncMock(side_effect=OperationalError("ROLLBACK", {}, Exception("connection lost"))),
    )
    return session


@pytest.mark.asyncio
async def test_rollback_failure_raises_store_error():
    uow = SqlAlchemyUnitOfWork(_failing_session("rollback"))

    with pytest.raises(StoreError):
        await uow.rollback()


@pytest.mark.asyncio
async def test_exit_failure_raises_store_error():
    """Leaving the unit of work rolls back, so a broken connection surfaces as StoreError"""
    uow = SqlAlchemyUnitOfWork(_failing_session("rollback"))

    with pytest.raises(StoreError):
        async with uow:
            pass


@pytest.mark.asyncio
async def test_commit_failure_raises_store_error():
    uow = SqlAlchemyUnitOfWork(_failing_session("commit"))

    with pytest.raises(StoreError):
        await uow.commit()


@pytest.mark.asyncio
async def test_ping_reports_failure():
    session = MagicMock()
    session.connection = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("refused")))
    uow = SqlAlchemyUnitOfWork(session)

    assert await uow.ping() is False
