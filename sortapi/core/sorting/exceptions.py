from typing import Iterable, Optional, Tuple

from sortapi.core.exceptions import SortAPIError


class SortingError(SortAPIError):
    pass


class UnsupportedSortFieldError(SortingError):
    def __init__(self, field: str, resource: Optional[str] = None, allowed: Iterable[str] = ()) -> None:
        self.field = field
        self.resource = resource
        self.allowed: Tuple[str, ...] = tuple(allowed)
        target = f" for {resource}" if resource else ""
        super().__init__(f"Invalid sorting field '{field}'{target}")


class InvalidSortingError(SortingError):
    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid sorting '{raw}': {reason}")


class UnknownResourceTypeError(SortAPIError, KeyError):
    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"no sortable fields registered for resource '{resource}'")

    def __str__(self) -> str:
        # KeyError quotes its argument
        return str(self.args[0])
