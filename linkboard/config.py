from functools import lru_cache
from typing import cast

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from linkboard import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(
        default="Linkboard",
        description="Application name",
    )
    api_base_url: AnyHttpUrl = Field(
        default=cast(AnyHttpUrl, "http://localhost:8000"),
        description="Base URL the title resolver uses to reach /api/metadata",
    )
    page_address: str = Field(
        default="http://localhost:8000/",
        description="Address of the page a board reflects its state into",
    )
    database_url: str = Field(
        default="sqlite+aiosqlite:///./linkboard.db",
        description="Connection URL of the local persistent store",
    )
    storage_key: str = Field(
        default="links",
        description="Key the serialized collection is stored under",
    )
    share_param: str = Field(
        default="links",
        description="Query parameter carrying the shared collection",
    )
    metadata_cache_max_age: int = Field(
        default=86400,
        description="max-age (seconds) advertised on successful title lookups",
    )
    user_agent: str = Field(
        default=f"Linkboard/{__version__}",
        description="User-Agent sent when fetching pages",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LINKBOARD_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
