# logger.py
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def init_logging(level: str = "INFO", time_format: str = "%Y-%m-%dT%H:%M:%S") -> None:
    """Configure the root logger once; later calls only change the level."""
    global _handler
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _handler is not None and _handler in root.handlers:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=time_format))
    root.addHandler(_handler)
