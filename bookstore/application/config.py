"""Application configuration using Pydantic Settings."""

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataConfiguration(BaseModel):
    """Location of the bookstore XML document."""

    file_path: str = "data/bookstore.xml"
    # Write an empty <bookstore /> document on startup if the file is missing
    create_if_missing: bool = True


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Nested values use a double underscore, e.g.
    ``DATA_CONFIGURATION__FILE_PATH=/srv/books.xml``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "bookstore"
    app_version: str = "0.1.0"
    debug: bool = False

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Storage
    data_configuration: DataConfiguration = DataConfiguration()


# Create a singleton instance
settings = Settings()
