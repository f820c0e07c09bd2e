import logging
import os


def setup_logging(name: str | None = None, level: int | str | None = None) -> logging.Logger:
    """Set up basic logging and return a named logger.

    The level defaults to the ``LOG_LEVEL`` environment variable (INFO).
    """
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return logging.getLogger(name)
