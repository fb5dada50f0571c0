"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_run_context(): Context manager for run-scoped logging

Processors:
    - add_app_info(): Processor to add app name/version
    - mask_sensitive_data(): Processor to redact API keys and secrets
    - truncate_large_values(): Processor to limit string lengths

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_run_context,
    )

    configure_logging()

    logger = get_module_logger()

    with bind_run_context(catalog_path="Localizable.xcstrings"):
        logger.info("run_started")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
    logger,
)

from infrastructure.logging.context import bind_run_context

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "logger",
    # Context
    "bind_run_context",
    # Processors
    "add_app_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
