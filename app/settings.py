from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Postgres
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USERNAME: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DATABASE: str = "postgres_db"

    # Full SQLAlchemy URL, wins over the POSTGRES_* parts when set
    DATABASE_URL: str = ""
    CREATE_TABLES: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    # API
    API_PREFIX: str = "/api/blog"
    BLOG_STAFF_TOKEN: str = ""

    # Blog
    DEFAULT_AUTHOR: str = "Pan Logistics"
    DEFAULT_PAGE_SIZE: int = 10
    MEDIA_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100
    TOP_POSTS_LIMIT: int = 5

    @property
    def postgres_url(self) -> str:
        return f"postgresql://{self.POSTGRES_USERNAME}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DATABASE}"

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL or self.postgres_url


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
