"""
Action Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RecordActionCommand: Input to use case (raw intent, validated by the use case)
- RecordActionResponse: Output from use case (structured result)
"""

from typing import Any, Optional

from pydantic import BaseModel


class RecordActionCommand(BaseModel):
    """
    Record action command

    Fields stay loose: presence and enum membership are checked by
    RecordActionUseCase so that both failures map to distinct error codes.
    action may carry any JSON value; only "read" and "write" are accepted.
    """

    user_id: Optional[str] = None
    action: Optional[Any] = None


class RecordActionResponse(BaseModel):
    """Persisted action event"""

    action_id: str
    user_id: str
    action: str
    timestamp: str
