import logging
import threading

from .constants import DIAG_LOGGER_NAME, DIAG_FORMAT, DIAG_DATEFMT

_lock = threading.Lock()


def get_logger() -> logging.Logger:
    """
    Returns the logger used for the adapter's own diagnostics (stderr).
    Never routed back through syslog.
    """
    logger = logging.getLogger(DIAG_LOGGER_NAME)
    with _lock:
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(fmt=DIAG_FORMAT, datefmt=DIAG_DATEFMT)
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.propagate = False
    return logger
