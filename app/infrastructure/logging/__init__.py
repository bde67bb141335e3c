"""Structured logging infrastructure.

Centralized structlog configuration for the language resolver.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - logger: Module-level configured logger

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("language_created", tag="en-GB")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    logger,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "logger",
]
