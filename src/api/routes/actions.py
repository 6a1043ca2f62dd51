"""
Action API Routes

Handles recording of user read/write actions.
"""

from typing import Any, Literal, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.api.error import ClientError, ServerError
from src.api.utils.api_key import verify_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.actions import (
    RecordActionCommand,
    RecordActionResponse,
    RecordActionUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import ActionType

router = APIRouter(tags=["Actions"])

REQUIRED_FIELDS = ["userId", "action"]


class TrackActionRequest(BaseModel):
    """
    Track action HTTP request payload

    Both fields are optional at the HTTP layer so that missing fields and
    unknown actions are reported with their own error codes instead of a
    generic validation failure.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId", description="Acting user identifier")
    action: Optional[Any] = Field(None, description="Action type: read or write")


class ActionRecorded(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    action_id: str
    user_id: str
    action: str
    timestamp: str


class TrackActionResponse(BaseModel):
    """POST /v1/actions response payload"""

    status: Literal["success"] = "success"
    data: ActionRecorded


def _raise_for_error(error):
    if error.code == "MISSING_FIELD":
        raise ClientError(error, extra={"required": REQUIRED_FIELDS})
    if error.code == "INVALID_ACTION_TYPE":
        raise ClientError(error, extra={"validActions": ActionType.values()})
    raise ServerError(error)


async def _record(request: Optional[TrackActionRequest], uow: UnitOfWork) -> TrackActionResponse:
    request = request or TrackActionRequest()
    command = RecordActionCommand(user_id=request.user_id, action=request.action)

    use_case = RecordActionUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for_error(result.error)

    recorded: RecordActionResponse = result.value
    return TrackActionResponse(data=ActionRecorded(**recorded.model_dump()))


@router.post(
    "/actions",
    status_code=status.HTTP_201_CREATED,
    response_model=TrackActionResponse,
    dependencies=[Depends(verify_api_key)],
)
async def record_action(
    request: Optional[TrackActionRequest] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Record Action

    Persists one read/write event for a user, stamped with the server time.

    Raises:
        - 400 Bad Request: userId/action missing (MISSING_FIELD)
        - 400 Bad Request: action not read/write (INVALID_ACTION_TYPE)
        - 401 Unauthorized: API key configured and missing/invalid
        - 500 Internal Server Error: Store failure
    """
    return await _record(request, uow)


legacy_router = APIRouter(tags=["Actions"])


@legacy_router.post(
    "/track",
    status_code=status.HTTP_201_CREATED,
    response_model=TrackActionResponse,
    dependencies=[Depends(verify_api_key)],
    include_in_schema=False,
)
async def track_action(
    request: Optional[TrackActionRequest] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Unversioned alias of POST /v1/actions kept for older clients"""
    return await _record(request, uow)
