from functools import lru_cache

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sortapi.core.fields import SortingDirection


class SortingSettings(BaseModel):
    default_direction: SortingDirection = SortingDirection.ASCENDING
    delimiter: str = Field(":", min_length=1, description="separates a field from its direction")
    separator: str = Field(",", min_length=1, description="separates sorting tokens")
    examples_count: int = Field(3, ge=0, description="number of fields documented in openapi examples")

    @field_validator("separator")
    @classmethod
    def separator_differs_from_delimiter(cls, v: str, info: ValidationInfo) -> str:
        if v == info.data.get("delimiter"):
            raise ValueError("separator and delimiter must differ")
        return v


class Settings(BaseSettings):
    sorting: SortingSettings = Field(default_factory=SortingSettings)

    model_config = SettingsConfigDict(env_nested_delimiter="__", env_prefix="SORTAPI_")


@lru_cache
def get_settings() -> Settings:
    return Settings()
