"""
Analytics Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel


class ActionSummary(BaseModel):
    """Count and most recent timestamp for one action type"""

    count: int = 0
    last_activity: Optional[str] = None


class ActionAnalyticsResponse(BaseModel):
    """
    Per-action summaries for one user over a trailing window.

    Both read and write are always present, zeroed when the user has no
    events of that type in the window.
    """

    user_id: str
    period_days: int
    read: ActionSummary
    write: ActionSummary
