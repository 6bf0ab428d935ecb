"""Standard library logging setup.

Domain events go through Logfire. Plain ``logging`` covers uvicorn,
SQLAlchemy and the API exception handlers.
"""

import logging
import sys

from ctfhub.config import Settings


def setup_logging(settings: Settings) -> None:
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "test":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # SQL is traced by Logfire already
    for noisy in ("sqlalchemy.engine", "asyncpg"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    logging.getLogger("ctfhub").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``ctfhub`` hierarchy configured above."""
    return logging.getLogger(name)
