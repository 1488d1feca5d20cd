"""Structlog setup for typed-i18n.

Importing this module configures nothing. Applications call
configure_logging() once at startup; until then structlog's defaults apply.

Usage:
    from typed_i18n.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from typed_i18n.configuration import settings


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Route structlog through the standard library with env-aware rendering.

    Args:
        log_level: Log level name. Defaults to settings.LOG_LEVEL.
        is_production: JSON output when True, console output when False.
            Defaults to settings.is_production.

    Returns:
        Configured logger instance
    """
    prod_mode = is_production if is_production is not None else settings.is_production
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
    logging.getLogger("typed_i18n").setLevel(level)
    return structlog.stdlib.get_logger()


def get_module_logger():
    """Get a lazy logger bound to the calling module.

    The logger picks up whatever configuration is active at its first use,
    so module-level loggers created at import follow a later
    configure_logging() call.

    Example:
        # In typed_i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator", "module_path": "typed_i18n.translator"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is None:
        return structlog.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        module_name,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
