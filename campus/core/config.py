from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    # App
    app_name: str = "Campus Administration"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_dir: str = "/var/log/campus"
    file_logging: bool = False

    # RBAC
    role_table_path: Optional[str] = None  # YAML file replacing the built-in role table

    model_config = SettingsConfigDict(
        env_prefix="CAMPUS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Allow extra env vars without raising validation errors
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
