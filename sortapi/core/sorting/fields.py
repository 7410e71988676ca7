from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import ConfigDict, Field, field_validator

from sortapi.core.config import get_settings
from sortapi.core.fields import SortingDirection
from sortapi.core.models import SortAPIModel

from .exceptions import InvalidSortingError


class ResourceType(str, Enum):
    PROJECTS = "projects"


class SortableFields(str, Enum):
    ID = "id"
    NAME = "name"
    LAST_UPDATED_AT = "last_updated_at"
    CREATED_AT = "created_at"
    LAST_UPDATED_TRACE_AT = "last_updated_trace_at"
    DURATION_AGG = "duration_agg"
    TOTAL_ESTIMATED_COST_SUM = "total_estimated_cost_sum"


def _default_direction() -> SortingDirection:
    return get_settings().sorting.default_direction


class SortingField(SortAPIModel):
    """
    A single sort criterion: the field to order by and the direction.

    Instances are immutable, the unary operators return new instances:

    >>> +SortingField(field="name")
    <name: asc>
    >>> -SortingField(field="name")
    <name: desc>
    """

    field: str = Field(..., min_length=1, description="the field to sort by")
    direction: SortingDirection = Field(default_factory=_default_direction, description="the sorting direction")

    model_config = ConfigDict(frozen=True)

    @field_validator("field", mode="before")
    @classmethod
    def strip_field(cls, v: Any) -> Any:
        if isinstance(v, Enum):
            v = v.value
        return v.strip() if isinstance(v, str) else v

    @field_validator("direction", mode="before")
    @classmethod
    def case_insensitive_direction(cls, v: Any) -> Any:
        if v is None:
            return _default_direction()
        if isinstance(v, str) and not isinstance(v, SortingDirection):
            return SortingDirection(v)
        return v

    def __neg__(self) -> "SortingField":
        return self.model_copy(update={"direction": SortingDirection.DESCENDING})

    def __pos__(self) -> "SortingField":
        return self.model_copy(update={"direction": SortingDirection.ASCENDING})

    def __invert__(self) -> "SortingField":
        return self.model_copy(update={"direction": ~self.direction})

    def __repr__(self) -> str:
        return f"<{self.field}: {self.direction.value}>"

    def __str__(self) -> str:
        return f"{self.field}{get_settings().sorting.delimiter}{self.direction.value}"

    @classmethod
    def parse(
        cls,
        token: str,
        *,
        delimiter: Optional[str] = None,
        default_direction: Optional[SortingDirection] = None,
    ) -> "SortingField":
        """
        Parse a ``field[:direction]`` token.

        :param token: the raw token, e.g. ``name:desc`` or ``created_at``
        :param delimiter: overrides the configured field/direction delimiter
        :param default_direction: direction used when the token carries none
        :raises InvalidSortingError: blank field or unknown direction
        """
        settings = get_settings().sorting
        field, _, direction = token.partition(delimiter or settings.delimiter)
        if not field.strip():
            raise InvalidSortingError(token, "field is missing")

        try:
            parsed_direction = (
                SortingDirection(direction)
                if direction.strip()
                else default_direction or settings.default_direction
            )
        except ValueError as e:
            raise InvalidSortingError(token, f"unknown direction '{direction}'") from e

        return cls(field=field, direction=parsed_direction)

    @classmethod
    def coerce(cls, value: "SortingFieldLike") -> "SortingField":
        if isinstance(value, SortingField):
            return value
        if isinstance(value, str):
            return cls.parse(value)

        try:
            if isinstance(value, Mapping):
                return cls.model_validate(value)
            if isinstance(value, tuple) and len(value) == 2:  # noqa: PLR2004
                field, direction = value
                return cls(field=field, direction=direction)
        except ValueError as e:
            raise InvalidSortingError(str(value), "not a valid sorting field") from e

        raise InvalidSortingError(str(value), f"unsupported sorting value of type {type(value).__name__}")


SortingFieldLike = Union[SortingField, str, Tuple[Any, Any], Mapping[str, Any]]
SortSpec = Tuple[SortingField, ...]
