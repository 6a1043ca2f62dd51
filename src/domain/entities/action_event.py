"""
ActionEvent Entity

Immutable record of a single read or write performed by a user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now
from .enums import ActionType


class ActionEvent(SQLModel, table=True):
    """
    ActionEvent entity - one tracked user action.

    Business Rules:
    - Immutable (never updated or deleted)
    - user_id is the partition key; every analytics query filters on it
    - timestamp is assigned by the recorder, never by the caller
    """

    __tablename__ = "action_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: str = Field(min_length=1, max_length=255, index=True)
    action: ActionType

    timestamp: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))

    __table_args__ = (
        Index("idx_action_events_user_action_ts", "user_id", "action", "timestamp"),
    )
