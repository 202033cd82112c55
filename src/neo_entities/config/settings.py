"""
Settings for entity field validation.

Limits are read from the environment (prefix ``NEO_ENTITIES_``) or a ``.env``
file, so services can tighten them without code changes.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EntitySettings(BaseSettings):
    """Field-length limits enforced when entities are constructed."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_ENTITIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Audit envelope
    actor_max_length: int = Field(default=255, gt=0)
    execution_origin_max_length: int = Field(default=255, gt=0)
    business_operation_code_max_length: int = Field(default=255, gt=0)

    # Named entities (claims, roles)
    name_max_length: int = Field(default=255, gt=0)
    description_max_length: int = Field(default=1000, gt=0)

    # Users and credentials
    username_max_length: int = Field(default=255, gt=0)
    email_max_length: int = Field(default=254, gt=0)
    password_hash_max_length: int = Field(default=1024, gt=0)

    # Service clients
    scope_max_length: int = Field(default=255, gt=0)


@lru_cache()
def get_settings() -> EntitySettings:
    """Get the cached settings instance."""
    return EntitySettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
