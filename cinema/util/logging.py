"""Stdlib logging setup for scripts and the API process.

Structured events go through logfire; this module only configures the plain
``logging`` tree so uvicorn, alembic and our own loggers share one format.
"""

import logging
import sys

from cinema.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Library loggers that are chatty at INFO.
QUIET_LOGGERS = ("httpx", "httpcore", "asyncpg", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    # SQL echo only while debugging
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("cinema").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``cinema`` hierarchy.

    Scripts run as ``__main__``, so their loggers are re-rooted to pick up
    the level set above.
    """
    if name == "__main__":
        name = "cinema.scripts"
    elif not name.startswith("cinema"):
        name = f"cinema.{name}"
    return logging.getLogger(name)
