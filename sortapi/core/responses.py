from typing import Generic, List, Optional, Sequence

from pydantic import Field

from sortapi.core.models import SortAPIModel
from sortapi.core.sorting import DEFAULT_REGISTRY, SortingRegistry
from sortapi.core.sorting.factory import ResourceKey

from .types import TEntity


class SortablePage(SortAPIModel, Generic[TEntity]):
    content: List[TEntity]
    total: Optional[int] = None
    sortable_by: List[str] = Field(default_factory=list, description="the fields this listing can be sorted by")

    @classmethod
    def for_resource(
        cls,
        items: Sequence[TEntity],
        resource_type: ResourceKey,
        total: Optional[int] = None,
        registry: Optional[SortingRegistry] = None,
    ) -> "SortablePage[TEntity]":
        factory = (DEFAULT_REGISTRY if registry is None else registry)[resource_type]
        return cls(content=list(items), total=total, sortable_by=list(factory.sortable_fields))
