"""
Root logger configuration.

Modules log through ``logging.getLogger(__name__)``; this module attaches the
handlers once at startup. A console handler is always added, and a file handler
when a log file is configured.
"""
import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    logfile: str | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """
    Configure the root logger (or the given logger).

    Does nothing if the logger already has handlers (e.g. under pytest, or
    when the application factory is called more than once).

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive.
        logfile: Optional path of a file to also write log records to.
        logger: Logger to configure instead of the root logger.
    """
    target = logger or logging.getLogger()
    if target.handlers:
        return

    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    target.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        target.addHandler(file_handler)
