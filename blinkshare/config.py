"""Environment-driven settings for the BlinkShare backend."""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DATABASE_PORT = 5432
DATABASE_NAME = "postgres"
DATABASE_SCHEMA = "public"
DATABASE_DRIVER = "postgresql+psycopg2"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_host: str = "localhost"
    database_user: str = "postgres"
    database_password: str = ""
    database_url: str | None = None
    log_level: str = "INFO"

    def build_database_url(self) -> str | URL:
        """Return ``DATABASE_URL`` when set, otherwise the Postgres URL from parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            DATABASE_DRIVER,
            username=self.database_user,
            password=self.database_password,
            host=self.database_host,
            port=DATABASE_PORT,
            database=DATABASE_NAME,
        )


def get_settings() -> Settings:
    """Read settings fresh from the environment and ``.env``."""
    return Settings()
