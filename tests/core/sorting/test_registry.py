import pytest

from sortapi.core.sorting import (
    DEFAULT_REGISTRY,
    ResourceType,
    SortingFactory,
    SortingField,
    SortingRegistry,
    UnknownResourceTypeError,
    UnsupportedSortFieldError,
    get_sortable_fields,
    validate,
)

WIDGETS = SortingFactory(resource="widgets", sortable_fields=("id", "score"))


@pytest.mark.parametrize("resource_type", ["projects", ResourceType.PROJECTS])
def test_get_sortable_fields__projects(resource_type):  # noqa: ANN001
    assert get_sortable_fields(resource_type) == (
        "id",
        "name",
        "last_updated_at",
        "created_at",
        "last_updated_trace_at",
        "duration_agg",
        "total_estimated_cost_sum",
    )


def test_get_sortable_fields__when_unknown_resource__then_raise():
    with pytest.raises(UnknownResourceTypeError) as e:
        get_sortable_fields("spans")
    assert isinstance(e.value, KeyError)
    assert e.value.resource == "spans"
    assert str(e.value) == "no sortable fields registered for resource 'spans'"


@pytest.mark.parametrize("field", get_sortable_fields(ResourceType.PROJECTS))
def test_validate__every_project_field(field: str):
    assert validate(ResourceType.PROJECTS, [field]) == (SortingField(field=field),)


def test_validate__when_unsupported__then_raise():
    with pytest.raises(UnsupportedSortFieldError) as e:
        validate("projects", ["score:desc"])
    assert e.value.field == "score"


def test_validate__with_custom_registry():
    registry = SortingRegistry([WIDGETS])
    assert validate("widgets", ["score:desc"], registry=registry) == (SortingField(field="score", direction="desc"),)
    with pytest.raises(UnknownResourceTypeError):
        validate("projects", ["id"], registry=registry)


def test_registry__when_empty_registry__then_not_replaced_by_default():
    with pytest.raises(UnknownResourceTypeError):
        get_sortable_fields("projects", registry=SortingRegistry())


def test_registry__mapping_interface():
    registry = SortingRegistry([WIDGETS, SortingFactory(resource="gadgets", sortable_fields=("id",))])
    assert list(registry) == ["widgets", "gadgets"]
    assert len(registry) == 2  # noqa: PLR2004
    assert "widgets" in registry
    assert "spans" not in registry
    assert registry["widgets"] is WIDGETS
    assert registry.get("spans") is None


def test_registry__when_duplicate_resource__then_raise():
    with pytest.raises(ValueError, match="already registered"):
        SortingRegistry([WIDGETS, SortingFactory(resource="widgets", sortable_fields=("id",))])


def test_default_registry__contains_projects():
    assert ResourceType.PROJECTS in DEFAULT_REGISTRY
    assert DEFAULT_REGISTRY[ResourceType.PROJECTS].resource == "projects"
