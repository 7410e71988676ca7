from .factory import SortingFactory
from .fields import ResourceType, SortableFields

PROJECTS = SortingFactory(
    resource=ResourceType.PROJECTS,
    sortable_fields=(
        SortableFields.ID,
        SortableFields.NAME,
        SortableFields.LAST_UPDATED_AT,
        SortableFields.CREATED_AT,
        SortableFields.LAST_UPDATED_TRACE_AT,
        SortableFields.DURATION_AGG,
        SortableFields.TOTAL_ESTIMATED_COST_SUM,
    ),
    # computed from trace statistics, not project columns
    aggregated_fields=frozenset({SortableFields.DURATION_AGG, SortableFields.TOTAL_ESTIMATED_COST_SUM}),
)

BUILTIN_RESOURCES = (PROJECTS,)
