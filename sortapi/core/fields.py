from enum import Enum
from typing import Any, Optional


class SortingDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def _missing_(cls, value: Any) -> Optional["SortingDirection"]:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    def __invert__(self) -> "SortingDirection":
        return SortingDirection.DESCENDING if self is SortingDirection.ASCENDING else SortingDirection.ASCENDING
