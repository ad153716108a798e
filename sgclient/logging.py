import logging
from typing import IO, Optional

from pythonjsonlogger import jsonlogger


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_json_logging(
    level: int = logging.INFO,
    stream: Optional[IO[str]] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Route records from ``logger_name`` (root by default) to one JSON handler."""
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Clear existing handlers
    while logger.handlers:
        logger.handlers.pop()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
