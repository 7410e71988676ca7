import orjson
import pytest

from sortapi.core.fields import SortingDirection
from sortapi.core.sorting import InvalidSortingError, SortingField, parse_sorting, render_sorting


@pytest.mark.parametrize("raw", [None, "", "   ", "[]"])
def test_parse_sorting__when_empty__then_no_sorting(raw):  # noqa: ANN001
    assert parse_sorting(raw) == []


@pytest.mark.parametrize(
    "raw",
    [
        '[{"field": "name", "direction": "DESC"}, {"field": "created_at"}]',
        "name:desc,created_at",
        " name:desc , created_at:asc ,, ",
    ],
)
def test_parse_sorting__keeps_order(raw: str):
    assert parse_sorting(raw) == [
        SortingField(field="name", direction="desc"),
        SortingField(field="created_at", direction="asc"),
    ]


def test_parse_sorting__when_custom_tokens__then_used():
    assert parse_sorting("name|desc;id", delimiter="|", separator=";") == [
        SortingField(field="name", direction="desc"),
        SortingField(field="id", direction="asc"),
    ]


def test_parse_sorting__when_default_direction__then_applied_to_entries_without_direction():
    sorting = parse_sorting('[{"field": "id", "direction": null}]', default_direction=SortingDirection.DESCENDING)
    assert sorting == [SortingField(field="id", direction="desc")]


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        ("[{", "malformed json"),
        ('[{"field": "name", "direction": "up"}]', "unknown direction"),
        ('[{"direction": "asc"}]', "field is missing"),
        ('[{"field": ""}]', "field is missing"),
        ('["name"]', "expected an object"),
        ('{"field": "name", "direction": "desc"}', "expected a json array"),
        ("{", "malformed json"),
        ("name:up", "unknown direction"),
    ],
)
def test_parse_sorting__when_invalid__then_raise(raw: str, reason: str):
    with pytest.raises(InvalidSortingError, match=reason):
        parse_sorting(raw)


def test_render_sorting():
    rendered = render_sorting([SortingField(field="name", direction="desc"), SortingField(field="id")])
    assert orjson.loads(rendered) == [
        {"field": "name", "direction": "DESC"},
        {"field": "id", "direction": "ASC"},
    ]
    assert parse_sorting(rendered) == [SortingField(field="name", direction="desc"), SortingField(field="id")]
