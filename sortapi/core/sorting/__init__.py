from .exceptions import InvalidSortingError, SortingError, UnknownResourceTypeError, UnsupportedSortFieldError
from .factory import SortingFactory
from .fields import ResourceType, SortableFields, SortingField, SortSpec
from .parser import parse_sorting, render_sorting
from .registry import DEFAULT_REGISTRY, SortingRegistry, get_sortable_fields, validate

__all__ = [
    "DEFAULT_REGISTRY",
    "InvalidSortingError",
    "ResourceType",
    "SortableFields",
    "SortingError",
    "SortingFactory",
    "SortingField",
    "SortingRegistry",
    "SortSpec",
    "UnknownResourceTypeError",
    "UnsupportedSortFieldError",
    "get_sortable_fields",
    "parse_sorting",
    "render_sorting",
    "validate",
]
