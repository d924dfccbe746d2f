from __future__ import annotations

import logging
import sys

import structlog

from contractflow.core.config import settings
from contractflow.shared.enums import Env


def configure_logging(*, json_logs: bool | None = None) -> None:
    """
    Route structlog through the stdlib root handler.

    Outside ``dev`` every line is a JSON object so request ids and actor ids
    from the bound context can be searched; ``dev`` gets a plain console
    renderer. ``json_logs`` overrides the choice made from ``settings.env``.
    """
    if json_logs is None:
        json_logs = settings.env != Env.dev

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        # ConsoleRenderer formats exc_info itself.
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
