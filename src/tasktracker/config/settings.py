from pydantic_settings import BaseSettings
from pydantic import ConfigDict, field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase


class Settings(BaseSettings):
    """
    Application settings loaded from environment.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Database configuration
    # An explicit URL wins; otherwise the Postgres parts below are assembled.
    DATABASE_URL_OVERRIDE: str | None = None
    POSTGRES_DRIVER: str = "asyncpg"
    POSTGRES_USERNAME: str | None = None
    POSTGRES_PASSWORD: str | None = None
    POSTGRES_HOST: str | None = None
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str | None = None
    SQLITE_PATH: Path = Path("./tasktracker.db")

    # Test database configuration
    TEST_POSTGRES_DB: str | None = None
    TESTING: bool = False

    # SQLAlchemy
    SQLALCHEMY_ECHO: bool = False

    # Error rendering
    ERROR_LANGUAGE: Literal["en", "ja"] = "en"

    # Pagination (inclusive upper bound of page_size, per entity)
    PROJECT_MAX_PAGE_SIZE: int = 100
    USER_MAX_PAGE_SIZE: int = 100
    TASK_MAX_PAGE_SIZE: int = 100
    USER_ASSIGN_MAX_PAGE_SIZE: int = 100
    COMMENT_MAX_PAGE_SIZE: int = 100

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/tasktracker")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    ENABLE_SQL_LOGGING: bool = False

    # --- Derived settings ---
    @property
    def DATABASE_URL(self) -> str:
        """
        Return the database URL for the current environment.

        - DATABASE_URL_OVERRIDE, when set, is used as-is.
        - With Postgres settings present, `TESTING=True` plus `TEST_POSTGRES_DB`
          selects the test database, otherwise `POSTGRES_DB` is used.
        - Without Postgres settings, a local SQLite file (aiosqlite) is used.
        """
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE

        if not (self.POSTGRES_HOST and self.POSTGRES_DB):
            return f"sqlite+aiosqlite:///{self.SQLITE_PATH}"

        database = self.POSTGRES_DB
        if self.TESTING and self.TEST_POSTGRES_DB:
            database = self.TEST_POSTGRES_DB
        return (
            f"postgresql+{self.POSTGRES_DRIVER}://"
            f"{self.POSTGRES_USERNAME}:{self.POSTGRES_PASSWORD}@"
            f"{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/"
            f"{database}"
        )

    def max_page_size(self, entity: str) -> int:
        """Return the configured page_size bound for an entity name such as "task"."""
        return getattr(self, f"{entity.upper()}_MAX_PAGE_SIZE")

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize LOG_LEVEL to uppercase before validation, since the logging
        module expects level names such as "DEBUG" or "INFO".
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", "ERROR_LANGUAGE", mode="before")
    def normalize_lowercase(cls, v: str | None) -> str | None:
        return to_lowercase(v)

    @field_validator(
        "PROJECT_MAX_PAGE_SIZE",
        "USER_MAX_PAGE_SIZE",
        "TASK_MAX_PAGE_SIZE",
        "USER_ASSIGN_MAX_PAGE_SIZE",
        "COMMENT_MAX_PAGE_SIZE",
    )
    def check_page_size_bound(cls, v: int) -> int:
        if v < 1:
            raise ValueError("page size bound must be at least 1")
        return v

    model_config = ConfigDict(
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
