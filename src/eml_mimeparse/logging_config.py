"""
Structured logging setup for the parser and its command-line tool.

The library modules only call structlog.get_logger(); nothing is configured
until an application (or the CLI) calls setup_logging().
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def setup_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Minimum level name, defaults to settings.log_level
        json_output: Render JSON lines instead of console output,
            defaults to settings.log_json
    """
    level = (level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.log_json

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        # stdout carries the CLI results
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # main() may configure logging more than once per process
        cache_logger_on_first_use=False,
    )
