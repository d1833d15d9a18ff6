import syslog
import threading
from typing import Optional

from .FacilityABC import FacilityABC, OpenError


class SyslogFacility(FacilityABC):
    """
    Handle to the host syslog.

    The syslog module keeps a single connection per process, so every handle
    remembers its own ident, options, facility and mask and re-applies them
    when another handle was opened in between.
    """

    _lock = threading.Lock()
    _active: Optional["SyslogFacility"] = None

    def __init__(self, ident: str, options: int, facility: Optional[int]) -> None:
        self.ident = ident
        self.options = options
        self.facility = facility
        self._mask: int = syslog.LOG_UPTO(syslog.LOG_DEBUG)

    @classmethod
    def open(
        cls, ident: str, options: int, facility: Optional[int] = None
    ) -> "SyslogFacility":
        """
        Opens the host syslog and returns a handle bound to it.
        """
        handle = cls(ident, options, facility)
        with cls._lock:
            try:
                handle._openlog()
            except (TypeError, ValueError, OSError) as e:
                raise OpenError(f"Cannot open syslog for {ident!r}: {e}") from e
            SyslogFacility._active = handle
        return handle

    def _openlog(self) -> None:
        if self.facility is None:
            syslog.openlog(self.ident, self.options)
        else:
            syslog.openlog(self.ident, self.options, self.facility)

    def set_mask(self, priority: int) -> None:
        self._mask = syslog.LOG_UPTO(priority)

    def write(self, priority: int, text: str) -> None:
        with SyslogFacility._lock:
            if SyslogFacility._active is not self:
                self._openlog()
                SyslogFacility._active = self
            syslog.setlogmask(self._mask)
            # text is a format string, %% collapses back to %
            syslog.syslog(priority, text % ())

    def __str__(self) -> str:
        return "SyslogFacility"

    def __repr__(self) -> str:
        return f"SyslogFacility(ident={self.ident!r})"
