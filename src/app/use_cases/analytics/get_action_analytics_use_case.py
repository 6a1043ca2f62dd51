"""
Get Action Analytics Use Case

Summarizes a user's read/write activity over a trailing window of days.
"""

import logging
import math
import re
from datetime import timedelta
from typing import Any, Optional

from src.app.repositories.errors import StoreError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import to_iso, utc_now
from src.domain.entities import ActionType
from src.libs.result import Error, Result, Return
from .dtos import ActionAnalyticsResponse, ActionSummary

logger = logging.getLogger(__name__)

DEFAULT_PERIOD_DAYS = 30
MAX_PERIOD_DAYS = 3650

LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_period_days(raw: Any, default: int = DEFAULT_PERIOD_DAYS) -> int:
    """
    Parse a window length, falling back to `default` instead of rejecting.

    Only the leading integer is read, so "7.5" and "7days" mean 7.
    Absent, non-numeric, zero and negative values all yield `default`.
    Values above MAX_PERIOD_DAYS are clamped.
    """
    if raw is None or isinstance(raw, bool):
        return default

    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            return default
        days = int(raw)
    else:
        match = LEADING_INTEGER.match(str(raw))
        if match is None:
            return default
        days = int(match.group(1))

    if days <= 0:
        return default
    return min(days, MAX_PERIOD_DAYS)


class GetActionAnalyticsUseCase:
    """
    Use case for aggregating a user's actions.

    Business Rules:
    - user_id is required (MISSING_FIELD otherwise)
    - Window is [now - period_days, now]; the lower bound is inclusive
    - Result always carries both read and write, zeroed when absent
    - Store failures fail the whole aggregation (INTERNAL_ERROR), never a partial result
    """

    def __init__(self, uow: UnitOfWork, default_period_days: int = DEFAULT_PERIOD_DAYS):
        self.uow = uow
        self.default_period_days = default_period_days

    async def execute(
        self, user_id: Optional[str], period_days: Any = None
    ) -> Result[ActionAnalyticsResponse]:
        """
        Execute get action analytics use case.

        Args:
            user_id: User identifier (partition key)
            period_days: Raw window length in days; parsed with fallback

        Returns:
            Result with per-action summaries, or Error
        """
        user_id = (user_id or "").strip()
        if not user_id:
            return Return.err(Error("MISSING_FIELD", "Missing required fields"))

        days = parse_period_days(period_days, self.default_period_days)
        since = utc_now() - timedelta(days=days)

        try:
            async with self.uow:
                rows = await self.uow.action_events.summarize_by_action(user_id, since)
        except StoreError as exc:
            logger.exception(f"Failed to aggregate actions for user {user_id}")
            return Return.err(Error("INTERNAL_ERROR", str(exc)))

        summaries = {action_type: ActionSummary() for action_type in ActionType}
        for action_type, count, last_activity in rows:
            summaries[action_type] = ActionSummary(
                count=count,
                last_activity=to_iso(last_activity) if last_activity else None,
            )

        return Return.ok(
            ActionAnalyticsResponse(
                user_id=user_id,
                period_days=days,
                read=summaries[ActionType.read],
                write=summaries[ActionType.write],
            )
        )
