"""
Action Use Cases

Validation and persistence of tracked user actions.
"""

from .record_action_use_case import RecordActionUseCase
from .dtos import RecordActionCommand, RecordActionResponse

__all__ = [
    # Use Cases
    "RecordActionUseCase",
    # DTOs
    "RecordActionCommand",
    "RecordActionResponse",
]
