"""
Logging setup for the employee directory service.

Called once from the startup sequence, before the store is opened, so that
table creation, seeding counts, the resource registry and every later
creation/rejection line share one stdout format. Creation payloads carry
personal data and are never logged, only ids and error kinds.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
# Library loggers that would otherwise echo every request or statement
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "sqlalchemy.engine", "alembic")


def configure_logging(level: str = "INFO") -> None:
    """Install the directory log format on the root logger.

    Args:
        level: ``logging.level`` from settings.yaml or ``LOG_LEVEL``;
            unknown names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
