"""Structured logging for typed-i18n, built on structlog.

Public API:
    - configure_logging(): Opt-in logging setup for applications
    - get_module_logger(): Get a logger for the calling module
"""

from typed_i18n.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
