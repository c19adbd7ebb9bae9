"""Logging configuration for doc_codec.

@public

Loggers come from ``prefect.logging.get_logger``, which places them under the
``prefect`` namespace: ``get_pipeline_logger("doc_codec.bound")`` returns the
logger named ``prefect.doc_codec.bound``. Configuration therefore targets
``prefect.doc_codec``; a YAML file supplied through the environment must use
that name too.

Usage:
    >>> from doc_codec.logging import get_pipeline_logger
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.debug("Added document")

Environment variables:
    DOC_CODEC_LOGGING_CONFIG: Path to a YAML dictConfig file
    DOC_CODEC_LOG_LEVEL: Level for doc_codec loggers (falls back to settings.log_level)
    PREFECT_LOGGING_SETTINGS_PATH: Alternative config path
"""

import logging.config
import os
from pathlib import Path
from typing import Any

import yaml
from prefect.logging import get_logger

from doc_codec.settings import settings

PACKAGE_LOGGER = "doc_codec"
_PREFECT_PARENT = "prefect"

# Loggers whose level setup_logging(level=...) overrides
DEFAULT_LOG_LEVELS = {
    "doc_codec": "INFO",
    "doc_codec.bound": "INFO",
    "doc_codec.document_store": "INFO",
}


def qualified_logger_name(name: str) -> str:
    """Name of the logger get_logger(name) returns."""
    if name == _PREFECT_PARENT or name.startswith(f"{_PREFECT_PARENT}."):
        return name
    return f"{_PREFECT_PARENT}.{name}"


def default_log_level() -> str:
    return os.environ.get("DOC_CODEC_LOG_LEVEL") or settings.log_level


class LoggingConfig:
    """dictConfig source for doc_codec: a YAML file if one is configured, else built-in defaults.

    @public

    The file is looked up from the explicit ``config_path``, then
    DOC_CODEC_LOGGING_CONFIG, then PREFECT_LOGGING_SETTINGS_PATH. A path that
    does not exist falls back to the defaults. The loaded dict is cached.
    """

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or self._config_path_from_env()
        self._config: dict[str, Any] | None = None

    @staticmethod
    def _config_path_from_env() -> Path | None:
        for variable in ("DOC_CODEC_LOGGING_CONFIG", "PREFECT_LOGGING_SETTINGS_PATH"):
            if value := os.environ.get(variable):
                return Path(value)
        return None

    def load_config(self) -> dict[str, Any]:
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> dict[str, Any]:
        """Console output for doc_codec at default_log_level(); root stays at WARNING."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                qualified_logger_name(PACKAGE_LOGGER): {
                    "level": default_log_level(),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
        }

    def apply(self):
        """Hand the configuration to logging.config.dictConfig.

        A ``prefect`` logger entry also seeds PREFECT_LOGGING_LEVEL when unset.
        """
        config = self.load_config()
        logging.config.dictConfig(config)

        if "prefect" in config.get("loggers", {}):
            prefect_level = config["loggers"]["prefect"].get("level", "INFO")
            os.environ.setdefault("PREFECT_LOGGING_LEVEL", prefect_level)


_logging_config: LoggingConfig | None = None


def setup_logging(config_path: Path | None = None, level: str | None = None):
    """Configure doc_codec logging; ``level`` overrides every doc_codec logger.

    @public

    Example:
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            get_logger(logger_name).setLevel(level)

        os.environ["PREFECT_LOGGING_LEVEL"] = level


def get_pipeline_logger(name: str):
    """Return the Prefect logger for ``name``, configuring logging on first use.

    @public
    """
    if _logging_config is None:
        setup_logging()

    return get_logger(name)
