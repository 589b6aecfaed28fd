import os
import sys
import logging

# --------------------------------------------------------
# One root logger for the tracker service; stages use children
# --------------------------------------------------------
LOGGER_NAME = "posetrack"
LOG_LEVEL_ENV = "POSETRACK_LOG_LEVEL"

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.DEBUG)

# Per-frame tracker chatter is DEBUG; keep stdout at INFO unless asked
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(os.getenv(LOG_LEVEL_ENV, "INFO").upper())

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.propagate = False  # Prevent duplicate uvicorn logs


def get_logger(component: str) -> logging.Logger:
    """
    Child logger, e.g. get_logger("tracking") -> "posetrack.tracking".
    Inherits the handler above.
    """
    return logger.getChild(component)

