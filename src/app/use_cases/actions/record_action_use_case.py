import logging

from src.app.repositories.errors import StoreError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import to_iso, utc_now
from src.domain.entities import ActionEvent, ActionType
from src.libs.result import Error, Result, Return
from .dtos import RecordActionCommand, RecordActionResponse

logger = logging.getLogger(__name__)


class RecordActionUseCase:
    """
    Record Action Use Case

    Command/Response Pattern:
    - Input: RecordActionCommand (raw user_id/action strings)
    - Output: Result[RecordActionResponse]

    Business Logic:
    1. Reject missing or blank user_id/action (MISSING_FIELD)
    2. Parse action into ActionType (INVALID_ACTION_TYPE)
    3. Stamp the event with the current UTC time
    4. Persist exactly one ActionEvent and commit
    5. Store failures become INTERNAL_ERROR; nothing is retried
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RecordActionCommand) -> Result[RecordActionResponse]:
        user_id = (command.user_id or "").strip()
        action = command.action.strip() if isinstance(command.action, str) else command.action

        if not user_id or action is None or action == "":
            return Return.err(
                Error("MISSING_FIELD", "Missing required fields")
            )

        # Numbers, booleans and lists are not missing, just not a valid action
        if not isinstance(action, str) or action not in ActionType.values():
            return Return.err(
                Error(
                    "INVALID_ACTION_TYPE",
                    f"Invalid action type: {action!r}. Must be one of: read, write",
                )
            )
        action_type = ActionType(action)

        try:
            async with self.uow:
                action_event = ActionEvent(
                    user_id=user_id,
                    action=action_type,
                    timestamp=utc_now(),
                )
                action_event = await self.uow.action_events.create(action_event)
                await self.uow.commit()

                # Build before leaving the unit of work; its rollback expires loaded attributes
                response = RecordActionResponse(
                    action_id=str(action_event.id),
                    user_id=action_event.user_id,
                    action=action_event.action.value,
                    timestamp=to_iso(action_event.timestamp),
                )
        except StoreError as exc:
            logger.exception(f"Failed to record {action_type.value} action for user {user_id}")
            return Return.err(Error("INTERNAL_ERROR", str(exc)))

        logger.info(f"Recorded {action_type.value} action {response.action_id} for user {user_id}")
        return Return.ok(response)
