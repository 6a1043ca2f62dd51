"""
Action Tracker Domain Entities
"""

from .enums import ActionType
from .action_event import ActionEvent

__all__ = [
    # Enums
    "ActionType",
    # Entities
    "ActionEvent",
]
