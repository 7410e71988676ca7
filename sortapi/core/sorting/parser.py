import logging
from typing import Any, Iterable, List, Mapping, Optional

import orjson

from sortapi.core.config import get_settings
from sortapi.core.fields import SortingDirection

from .exceptions import InvalidSortingError
from .fields import SortingField

logger = logging.getLogger(__name__)

JSON_PREFIXES = ("[", "{")


def parse_sorting(
    raw: Optional[str],
    *,
    delimiter: Optional[str] = None,
    separator: Optional[str] = None,
    default_direction: Optional[SortingDirection] = None,
) -> List[SortingField]:
    """
    Parse the raw value of a ``sorting`` query parameter.

    Two formats are accepted:

    - a JSON array of objects, as sent by the UI:
      ``[{"field": "name", "direction": "ASC"}, {"field": "created_at"}]``
    - separated tokens: ``name:asc,created_at``

    The entries are returned in the order they were given, nothing is checked
    against an allow-list here.

    :param raw: the query value, ``None`` or blank means no sorting
    :param delimiter: separates a field from its direction, defaults to the settings
    :param separator: separates tokens, defaults to the settings
    :param default_direction: direction of entries without one, defaults to the settings
    :raises InvalidSortingError: the value is not valid in either format
    """
    if raw is None or not raw.strip():
        return []

    settings = get_settings().sorting
    default_direction = default_direction or settings.default_direction
    raw = raw.strip()

    if raw.startswith(JSON_PREFIXES):
        return _parse_json(raw, default_direction)

    tokens = [token.strip() for token in raw.split(separator or settings.separator)]
    return [
        SortingField.parse(token, delimiter=delimiter, default_direction=default_direction)
        for token in tokens
        if token
    ]


def _parse_json(raw: str, default_direction: SortingDirection) -> List[SortingField]:
    try:
        decoded: Any = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        logger.debug(f"could not decode sorting {raw!r}: {e}")
        raise InvalidSortingError(raw, "malformed json") from e

    if not isinstance(decoded, list):
        raise InvalidSortingError(raw, "expected a json array")

    sorting = []
    for item in decoded:
        if not isinstance(item, Mapping):
            raise InvalidSortingError(raw, f"expected an object, got {item!r}")
        field = item.get("field")
        if not isinstance(field, str) or not field.strip():
            raise InvalidSortingError(raw, "field is missing")
        direction = item.get("direction") or default_direction
        try:
            sorting.append(SortingField(field=field, direction=direction))
        except ValueError as e:
            raise InvalidSortingError(raw, f"unknown direction '{direction}'") from e

    return sorting


def render_sorting(sorting: Iterable[SortingField]) -> str:
    """Render sorting back to the JSON array format, directions upper-cased."""
    return orjson.dumps([{"field": i.field, "direction": i.direction.value.upper()} for i in sorting]).decode()
