from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Inkwell"

    # Role catalog (YAML), also carrying the logging section.
    # None means roles are built in code and logging uses the defaults.
    roles_config_path: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="INKWELL_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
