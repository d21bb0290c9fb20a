import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LEVEL_ENV_VAR = "IMGCMP_LOG_LEVEL"


def _level_for(name: str) -> int:
    # The CLI reports failures at INFO/ERROR; library modules stay quiet
    default = logging.INFO if name.rpartition('.')[2] == 'cli' else logging.WARNING

    override = os.getenv(LEVEL_ENV_VAR)
    if not override:
        return default

    level = logging.getLevelName(override.upper())
    return level if isinstance(level, int) else default


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr, so verdicts printed on stdout stay clean."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_level_for(name))
    return logger
