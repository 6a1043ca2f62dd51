"""
Analytics API Routes

Handles per-user action aggregation.
"""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.analytics import GetActionAnalyticsUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/analytics", tags=["Analytics"])


class ActionSummaryData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    count: int
    last_activity: Optional[str]


class ActionAnalyticsData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    period_days: int
    read: ActionSummaryData
    write: ActionSummaryData


class ActionAnalyticsEnvelope(BaseModel):
    """GET /v1/analytics/{userId} response payload"""

    status: Literal["success"] = "success"
    data: ActionAnalyticsData


async def _analytics(user_id: Optional[str], period: Optional[str], uow: UnitOfWork):
    use_case = GetActionAnalyticsUseCase(
        uow, default_period_days=ApplicationConfig.DEFAULT_PERIOD_DAYS
    )
    result = await use_case.execute(user_id=user_id, period_days=period)

    if result.is_err():
        error = result.error
        if error.code == "MISSING_FIELD":
            raise ClientError(error, extra={"required": ["userId"]})
        raise ServerError(error)

    return ActionAnalyticsEnvelope(
        data=ActionAnalyticsData.model_validate(result.value.model_dump())
    )


@router.get(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=ActionAnalyticsEnvelope,
)
async def get_action_analytics(
    user_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    period: Optional[str] = Query(
        None, description="Window length in days; invalid or non-positive values fall back to the default"
    ),
):
    """
    Get Action Analytics

    Returns count and last activity for read and write actions of a user
    within the trailing `period` days (inclusive lower bound).

    Both read and write are always present; a user without events in the
    window gets {count: 0, lastActivity: null} for each.

    Raises:
        - 400 Bad Request: blank userId (MISSING_FIELD)
        - 500 Internal Server Error: Store failure
    """
    return await _analytics(user_id, period, uow)


@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
async def get_action_analytics_without_user(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Path segment for the user is missing"""
    return await _analytics(None, None, uow)
