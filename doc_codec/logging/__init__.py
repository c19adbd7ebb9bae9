"""Logging infrastructure for doc_codec.

@public

Prefect-integrated logging configured from YAML or built-in defaults.

Example:
    >>> from doc_codec.logging import get_pipeline_logger
    >>>
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Collection bound")

Note:
    Never import Python's logging module directly. Always use
    get_pipeline_logger() for consistent configuration.
"""

from .logging_config import LoggingConfig, get_pipeline_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_pipeline_logger",
]
