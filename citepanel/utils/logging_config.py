import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"
PACKAGE_LOGGER = "citepanel"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    package_level: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for CitePanel and return the package logger.

    Parameters
    ----------
    level:
        Logging level name (e.g., "INFO", "DEBUG") for the root handler.
    log_file:
        Optional path to log output. When not provided, logs go to stderr.
    package_level:
        Level for the ``citepanel`` logger. Left untouched when not given, so
        a level set by the host application is kept.
    """

    logging_level = getattr(logging, level.upper(), logging.INFO)
    log_kwargs = {
        "level": logging_level,
        "format": LOG_FORMAT,
    }

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        log_kwargs["filename"] = log_file

    logging.basicConfig(**log_kwargs)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_level:
        package_logger.setLevel(getattr(logging, package_level.upper(), logging.INFO))
    return package_logger
