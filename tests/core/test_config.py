import pytest
from pydantic import ValidationError

from sortapi.core.config import Settings, SortingSettings, get_settings
from sortapi.core.fields import SortingDirection


def test_settings__defaults():
    settings = Settings()
    assert settings.sorting.default_direction is SortingDirection.ASCENDING
    assert settings.sorting.delimiter == ":"
    assert settings.sorting.separator == ","
    assert settings.sorting.examples_count == 3  # noqa: PLR2004


def test_settings__when_env_defined__then_nested_values_are_read(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SORTAPI_SORTING__DEFAULT_DIRECTION", "desc")
    monkeypatch.setenv("SORTAPI_SORTING__EXAMPLES_COUNT", "1")
    settings = Settings()
    assert settings.sorting.default_direction is SortingDirection.DESCENDING
    assert settings.sorting.examples_count == 1


def test_sorting_settings__when_separator_equals_delimiter__then_raise():
    with pytest.raises(ValidationError):
        SortingSettings(delimiter=",", separator=",")


def test_get_settings__is_cached():
    assert get_settings() is get_settings()
