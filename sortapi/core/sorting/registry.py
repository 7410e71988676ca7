from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .exceptions import UnknownResourceTypeError
from .factory import ResourceKey, SortingFactory, resource_key
from .fields import SortingFieldLike, SortSpec
from .resources import BUILTIN_RESOURCES


class SortingRegistry(Mapping[str, SortingFactory]):
    """Read-only mapping of resource type to its sorting allow-list."""

    def __init__(self, factories: Iterable[SortingFactory] = ()) -> None:
        by_resource: Dict[str, SortingFactory] = {}
        for factory in factories:
            if factory.resource in by_resource:
                raise ValueError(f"sortable fields for {factory.resource} are already registered")
            by_resource[factory.resource] = factory
        self._factories: Mapping[str, SortingFactory] = MappingProxyType(by_resource)

    def __getitem__(self, resource_type: ResourceKey) -> SortingFactory:
        key = resource_key(resource_type)
        try:
            return self._factories[key]
        except KeyError:
            raise UnknownResourceTypeError(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._factories)})"

    def get_sortable_fields(self, resource_type: ResourceKey) -> Tuple[str, ...]:
        return self[resource_type].sortable_fields

    def validate(self, resource_type: ResourceKey, requested: Optional[Iterable[SortingFieldLike]]) -> SortSpec:
        return self[resource_type].validate(requested)


DEFAULT_REGISTRY = SortingRegistry(BUILTIN_RESOURCES)


def _registry(registry: Optional[SortingRegistry]) -> SortingRegistry:
    return DEFAULT_REGISTRY if registry is None else registry


def get_sortable_fields(resource_type: ResourceKey, registry: Optional[SortingRegistry] = None) -> Tuple[str, ...]:
    return _registry(registry).get_sortable_fields(resource_type)


def validate(
    resource_type: ResourceKey,
    requested: Optional[Iterable[SortingFieldLike]],
    registry: Optional[SortingRegistry] = None,
) -> SortSpec:
    """
    Validate requested sorting for a resource type.

    :raises UnknownResourceTypeError: no allow-list is registered for the resource type
    :raises UnsupportedSortFieldError: a requested field is not sortable for the resource type
    """
    return _registry(registry).validate(resource_type, requested)
