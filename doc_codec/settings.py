"""Core configuration settings for doc_codec.

@public

Settings are loaded from environment variables with .env file support via
pydantic-settings.

Environment variables:
    DOCUMENT_STORE_PATH: Directory for LocalDocumentStore. Empty selects the
        in-memory store.
    LOG_LEVEL: Default log level for doc_codec loggers.

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from doc_codec.settings import settings
    >>> from doc_codec.document_store import create_document_store
    >>> store = create_document_store(settings)

Note:
    Settings are loaded once at module import and frozen. The process must be
    restarted to pick up changes to environment variables or the .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the bundled document store backends and logging.

    @public

    Attributes:
        document_store_path: Root directory for LocalDocumentStore. When empty,
            create_document_store() returns a MemoryDocumentStore.
        log_level: Level applied to doc_codec loggers when no logging
            configuration file overrides it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    document_store_path: str = ""
    log_level: str = "INFO"


settings = Settings()
"""Global settings instance, created at import time."""
