"""
Analytics Use Cases

Read-only aggregation over recorded action events.
"""

from .get_action_analytics_use_case import (
    DEFAULT_PERIOD_DAYS,
    MAX_PERIOD_DAYS,
    GetActionAnalyticsUseCase,
    parse_period_days,
)
from .dtos import ActionAnalyticsResponse, ActionSummary

__all__ = [
    # Use Cases
    "GetActionAnalyticsUseCase",
    "parse_period_days",
    "DEFAULT_PERIOD_DAYS",
    "MAX_PERIOD_DAYS",
    # DTOs
    "ActionAnalyticsResponse",
    "ActionSummary",
]
