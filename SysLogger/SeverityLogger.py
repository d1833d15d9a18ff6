import os
import sys
import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

import psutil

from .constants import Severity, PRIORITY_MAP, DEFAULT_OPTIONS, DEFAULT_LEVEL
from .FacilityABC import FacilityABC
from .SyslogFacility import SyslogFacility
from .Logger import get_logger


def default_ident() -> str:
    """
    Returns the name of the running program, falling back to the process name
    when the interpreter was started without a script (python -c, -m, REPL).
    """
    name = os.path.basename(sys.argv[0]) if sys.argv else ""
    if name in {"", "-c", "-m"}:
        name = psutil.Process().name()
    return name


class SeverityLogger:
    """
    Logger writing leveled messages to the system log.

    Usage:
        logger = SeverityLogger("my_app", syslog.LOG_PID | syslog.LOG_CONS, syslog.LOG_LOCAL0)
        logger.level = Severity.INFO
        logger.warn("warning message")
        logger.debug("debug message")  # dropped
    """

    def __init__(
        self,
        ident: Optional[str] = None,
        options: Optional[int] = None,
        facility: Optional[int] = None,
        opener: Callable[..., FacilityABC] = SyslogFacility.open,
    ) -> None:
        self._ident: str = ident if ident is not None else default_ident()
        self._options: int = options or DEFAULT_OPTIONS
        self._facility: Optional[int] = facility
        self._level: Severity = DEFAULT_LEVEL
        # raises OpenError, no half-built logger is returned
        self._handle: FacilityABC = opener(
            self._ident, self._options, self._facility
        )
        self._lock = threading.Lock()

    @property
    def ident(self) -> str:
        return self._ident

    @property
    def options(self) -> int:
        return self._options

    @property
    def facility(self) -> Optional[int]:
        return self._facility

    @property
    def level(self) -> Severity:
        return self._level

    @level.setter
    def level(self, level: int) -> None:
        self.set_level(level)

    def set_level(self, level: int) -> None:
        """
        Sets the minimum severity of messages written to the log.
        """
        self._level = Severity(level)

    def add(
        self,
        severity: int,
        message: Any = None,
        progname: Optional[str] = None,
        block: Optional[Callable[[], Any]] = None,
    ) -> None:
        """
        Low level method to add a message.
        If message is None or False the block result is used,
        then progname, then the ident.
        """
        if severity < self._level:
            return
        priority = PRIORITY_MAP[Severity(severity)]
        if message is False:
            message = None
        if message is None and block is not None:
            message = block() or None
        if message is None:
            message = progname if progname is not None else self._ident
        text = self.clean(message)
        try:
            with self._lock:
                self._handle.set_mask(PRIORITY_MAP[self._level])
                self._handle.write(priority, text)
        except Exception as e:
            get_logger().error(f"Cannot write to syslog ({self._ident}): {e}")

    def debug(
        self,
        message: Any = None,
        progname: Optional[str] = None,
        block: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.add(Severity.DEBUG, message, progname, block)

    def info(
        self,
        message: Any = None,
        progname: Optional[str] = None,
        block: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.add(Severity.INFO, message, progname, block)

    def warn(
        self,
        message: Any = None,
        progname: Optional[str] = None,
        block: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.add(Severity.WARN, message, progname, block)

    def error(
        self,
        message: Any = None,
        progname: Optional[str] = None,
        block: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.add(Severity.ERROR, message, progname, block)

    def fatal(
        self,
        message: Any = None,
        progname: Optional[str] = None,
        block: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.add(Severity.FATAL, message, progname, block)

    def unknown(
        self,
        message: Any = None,
        progname: Optional[str] = None,
        block: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.add(Severity.UNKNOWN, message, progname, block)

    warning = warn
    critical = fatal

    def is_enabled_for(self, severity: int) -> bool:
        """
        Checks if a message of the given severity would be written.
        """
        return severity >= self._level

    def is_debug(self) -> bool:
        return self.is_enabled_for(Severity.DEBUG)

    def is_info(self) -> bool:
        return self.is_enabled_for(Severity.INFO)

    def is_warn(self) -> bool:
        return self.is_enabled_for(Severity.WARN)

    def is_error(self) -> bool:
        return self.is_enabled_for(Severity.ERROR)

    def is_fatal(self) -> bool:
        return self.is_enabled_for(Severity.FATAL)

    def is_unknown(self) -> bool:
        return self.is_enabled_for(Severity.UNKNOWN)

    def __lshift__(self, message: Any) -> "SeverityLogger":
        self.add(Severity.INFO, message)
        return self

    @contextmanager
    def silence(
        self, temporary_level: int = Severity.ERROR
    ) -> Iterator["SeverityLogger"]:
        """
        Raises the level for the duration of the with block.
        Only protects against changes made by the same thread.
        """
        old_level = self._level
        self.set_level(temporary_level)
        try:
            yield self
        finally:
            self._level = old_level

    @staticmethod
    def clean(message: Any) -> str:
        """
        Strips trailing whitespace and escapes % so the text is never read as a format string.
        """
        return str(message).rstrip().replace("%", "%%")

    def __str__(self) -> str:
        return "SeverityLogger"

    def __repr__(self) -> str:
        return f"SeverityLogger(ident={self._ident!r}, level={self._level.name})"
