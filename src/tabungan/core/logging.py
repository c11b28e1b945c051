"""Logging setup shared by the API process and background jobs."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler with the service log format."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("apscheduler").setLevel(logging.WARNING)
