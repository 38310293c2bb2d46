"""
Logging setup: stdlib logging to stdout, structlog on top of it.
"""

import logging
import sys

import structlog

from .config import config


def setup_logging(level: str = None, fmt: str = None):
    """Configure logging and structlog. Values default to config.logging."""
    log_config = config.logging
    level = (level or log_config.get('level', 'INFO')).upper()
    fmt = fmt or log_config.get('format', 'json')

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
        force=True,
    )

    if fmt == 'console':
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
