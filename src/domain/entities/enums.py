"""
Action Tracker Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ActionType(str, Enum):
    """Kind of action a user performed"""

    read = "read"
    write = "write"

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]
