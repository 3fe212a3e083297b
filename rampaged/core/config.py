from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Configuration loaded from environment variables / .env file."""

    app_name: str = "RamPaged Reference API"
    app_env: str = "development"
    app_port: int = 8000
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database (SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./rampaged_dev.db",
        alias="DATABASE_URL",
    )

    # Paging defaults
    default_page_size: int = Field(default=10, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(
        default=200, alias="MAX_PAGE_SIZE",
    )  # larger requests are clamped, never rejected
    pagination_header: str = Field(default="X-Pagination", alias="PAGINATION_HEADER")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
