"""
Use Cases

Organized into domain folders:
- actions/: Recording user actions
- analytics/: Aggregating recorded actions
"""

from .actions import (
    RecordActionUseCase,
    RecordActionCommand,
    RecordActionResponse,
)
from .analytics import (
    GetActionAnalyticsUseCase,
    ActionAnalyticsResponse,
)

__all__ = [
    # Actions
    "RecordActionUseCase",
    "RecordActionCommand",
    "RecordActionResponse",
    # Analytics
    "GetActionAnalyticsUseCase",
    "ActionAnalyticsResponse",
]
