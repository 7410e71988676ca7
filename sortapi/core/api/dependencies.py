import logging
from typing import List, Optional

from fastapi import Depends, Query, params

from sortapi.core.api.error_details import ErrorParameter
from sortapi.core.api.exceptions import BadRequestHttpError
from sortapi.core.sorting import (
    DEFAULT_REGISTRY,
    InvalidSortingError,
    SortingRegistry,
    SortSpec,
    UnsupportedSortFieldError,
)
from sortapi.core.sorting.factory import ResourceKey

logger = logging.getLogger(__name__)

SORTING_PARAM = "sorting"


def sorting_query(resource_type: ResourceKey, registry: Optional[SortingRegistry] = None) -> params.Depends:
    """
    Build a FastAPI dependency which reads the ``sorting`` query parameter of a listing
    and returns it validated against the allow-list of ``resource_type``.

    The resource type is resolved here, so an unknown one fails when the route is declared
    rather than on the first request.

    >>> @router.get("/projects")
    ... async def list_projects(sorting: SortSpec = sorting_query(ResourceType.PROJECTS)): ...
    """
    factory = (DEFAULT_REGISTRY if registry is None else registry)[resource_type]
    allowed: List[str] = list(factory.sortable_fields)

    def dependency(
        sorting: Optional[str] = Query(
            None,
            alias=SORTING_PARAM,
            description=f"sort {factory.resource} by any of: {', '.join(allowed)}",
            openapi_examples=factory.examples,  # type: ignore[arg-type]
        ),
    ) -> SortSpec:
        try:
            return factory.new_sorting(sorting)
        except UnsupportedSortFieldError as e:
            parameters = [
                ErrorParameter(name=SORTING_PARAM, value=e.field),
                ErrorParameter(name="sortable_by", value=allowed),
            ]
            raise BadRequestHttpError(str(e), parameters=parameters) from e
        except InvalidSortingError as e:
            logger.debug(f"bad sorting for {factory.resource}: {e.reason}")
            raise BadRequestHttpError(str(e), parameters=[ErrorParameter(name=SORTING_PARAM, value=e.raw)]) from e

    return Depends(dependency)
