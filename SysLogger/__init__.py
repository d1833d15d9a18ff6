import threading
from typing import Any, Dict, Optional

from .constants import Severity, LOG_IDENT, LOG_LEVEL, LOG_OPTIONS, LOG_FACILITY
from .constants import VERSION
from .FacilityABC import FacilityABC, OpenError
from .SyslogFacility import SyslogFacility
from .SeverityLogger import SeverityLogger, default_ident
from .SeverityHandler import SeverityHandler, severity_for_levelno

__version__ = VERSION

_loggers: Dict[str, SeverityLogger] = {}
_lock = threading.Lock()


def get_sys_logger(ident: Optional[str] = None) -> SeverityLogger:
    """
    Returns the logger for the given ident, opening it on first use.
    """
    ident = ident or LOG_IDENT or default_ident()
    if ident not in _loggers:
        with _lock:
            if ident not in _loggers:
                logger = SeverityLogger(ident, LOG_OPTIONS, LOG_FACILITY)
                logger.set_level(LOG_LEVEL)
                _loggers[ident] = logger
    return _loggers[ident]


def log(severity: int, content: Any) -> None:
    get_sys_logger().add(severity, content)


__all__ = [
    "Severity",
    "FacilityABC",
    "OpenError",
    "SyslogFacility",
    "SeverityLogger",
    "SeverityHandler",
    "severity_for_levelno",
    "get_sys_logger",
    "log",
]
