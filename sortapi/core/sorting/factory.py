import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from sortapi.core.config import get_settings
from sortapi.core.fields import SortingDirection

from .exceptions import UnsupportedSortFieldError
from .fields import SortingField, SortingFieldLike, SortSpec
from .parser import parse_sorting

logger = logging.getLogger(__name__)

ResourceKey = Union[str, Enum]


def resource_key(resource_type: ResourceKey) -> str:
    return resource_type.value if isinstance(resource_type, Enum) else str(resource_type)


def _is_single_pair(value: Any) -> bool:
    if not (isinstance(value, tuple) and len(value) == 2):  # noqa: PLR2004
        return False
    try:
        SortingDirection(value[1])
    except ValueError:
        return False
    return True


def _field_names(fields: Iterable[Union[str, Enum]]) -> Tuple[str, ...]:
    return tuple(i.value if isinstance(i, Enum) else str(i) for i in fields)


@dataclass(frozen=True)
class SortingFactory:
    """
    The fixed allow-list of sortable fields of one resource type.

    ``sortable_fields`` keeps the declaration order, it is what clients are shown.
    ``aggregated_fields`` are the sortable fields computed from statistics rather than
    stored columns, a listing sorted by one of them must be ordered by the statistics query.
    """

    resource: str
    sortable_fields: Tuple[str, ...]
    aggregated_fields: FrozenSet[str] = frozenset()
    _allowed: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        resource = resource_key(self.resource)
        sortable_fields = _field_names(self.sortable_fields)
        aggregated_fields = frozenset(_field_names(self.aggregated_fields))
        allowed = frozenset(sortable_fields)

        if len(allowed) != len(sortable_fields):
            duplicates = sorted({i for i in sortable_fields if sortable_fields.count(i) > 1})
            raise ValueError(f"duplicate sortable fields {duplicates} for {resource}")
        if not aggregated_fields <= allowed:
            raise ValueError(f"aggregated fields {sorted(aggregated_fields - allowed)} are not sortable for {resource}")

        object.__setattr__(self, "resource", resource)
        object.__setattr__(self, "sortable_fields", sortable_fields)
        object.__setattr__(self, "aggregated_fields", aggregated_fields)
        object.__setattr__(self, "_allowed", allowed)

    def is_sortable(self, field_name: Union[str, Enum]) -> bool:
        return _field_names([field_name])[0] in self._allowed

    def validate(self, requested: Optional[Iterable[SortingFieldLike]]) -> SortSpec:
        """
        Validate requested sorting against the allow-list.

        The caller order and directions are kept. A field requested more than once
        is kept at its first occurrence only.

        A single entry may be passed on its own instead of inside a sequence, a bare
        two-item tuple is read as one pair when its second item is a direction.

        :param requested: sorting fields, ``field[:direction]`` tokens, ``(field, direction)`` pairs or mappings
        :raises UnsupportedSortFieldError: a requested field is not in the allow-list
        :raises InvalidSortingError: a requested value cannot be read as a sorting field
        """
        if requested is None:
            return ()
        if isinstance(requested, (str, SortingField, Mapping)) or _is_single_pair(requested):
            requested = (requested,)

        validated: Dict[str, SortingField] = {}
        for value in requested:
            sorting_field = SortingField.coerce(value)
            if sorting_field.field not in self._allowed:
                logger.debug(f"rejected sorting field {sorting_field.field!r} for {self.resource}")
                raise UnsupportedSortFieldError(sorting_field.field, self.resource, self.sortable_fields)
            if sorting_field.field in validated:
                logger.debug(f"dropped duplicate sorting field {sorting_field!r} for {self.resource}")
                continue
            validated[sorting_field.field] = sorting_field

        return tuple(validated.values())

    def new_sorting(self, raw: Optional[str]) -> SortSpec:
        return self.validate(parse_sorting(raw))

    def requires_aggregation(self, sorting: SortSpec) -> bool:
        return any(i.field in self.aggregated_fields for i in sorting)

    def partition(self, sorting: SortSpec) -> Tuple[SortSpec, SortSpec]:
        """Split sorting into (column sorting, aggregated sorting), both in request order."""
        columns: List[SortingField] = []
        aggregated: List[SortingField] = []
        for i in sorting:
            (aggregated if i.field in self.aggregated_fields else columns).append(i)
        return tuple(columns), tuple(aggregated)

    @property
    def examples(self) -> Dict[str, Dict[str, str]]:
        examples = {}
        for field_name in self.sortable_fields[: get_settings().sorting.examples_count]:
            for direction in (SortingDirection.DESCENDING, SortingDirection.ASCENDING):
                value = str(SortingField(field=field_name, direction=direction))
                examples[value] = {
                    "summary": f"order by {field_name} {direction.value}",
                    "value": value,
                }
        return examples
