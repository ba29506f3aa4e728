"""
Configure simple logging for objtasks scripts.
"""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Route all records to stdout at the given level.

    level may be a logging constant or a level name ("debug", "INFO", ...).
    Unknown names raise ValueError.
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.handlers = [handler]
    return root
