"""
logging_config.py - logging setup for the cart API.

Every module logs through ``logging.getLogger(__name__)``; this module only
wires the root handler once at startup.
"""

import logging
import sys

from core.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL):
    """
    Configures the root logger.

    - Log level: LOG_LEVEL from the environment (default INFO)
    - Format: timestamp, level, process ID, logger name, message
    - Output: stdout (Docker/Kubernetes friendly)
    - Driver libraries (pymongo, motor) are limited to WARNING
    """
    log_format = '%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("motor").setLevel(logging.WARNING)
