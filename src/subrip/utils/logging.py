"""structlog configuration shared by the CLI and the HTTP API."""

import logging
import sys

import structlog

from subrip.utils.config import get_settings


def setup_logging(level: str | None = None, *, json: bool | None = None) -> None:
    """Configure structlog output.

    Args:
        level: Minimum log level name, defaults to the configured log_level
        json: Emit JSON lines instead of console output, defaults to log_json
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    use_json = settings.log_json if json is None else json

    renderer: structlog.typing.Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[level_name]
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
