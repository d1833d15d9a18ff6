import logging

from .constants import Severity
from .SeverityLogger import SeverityLogger


def severity_for_levelno(levelno: int) -> Severity:
    """
    Translates a stdlib logging level number into a Severity.
    """
    if levelno < logging.INFO:
        return Severity.DEBUG
    if levelno < logging.WARNING:
        return Severity.INFO
    if levelno < logging.ERROR:
        return Severity.WARN
    if levelno < logging.CRITICAL:
        return Severity.ERROR
    if levelno == logging.CRITICAL:
        return Severity.FATAL
    return Severity.UNKNOWN


class SeverityHandler(logging.Handler):
    """
    Logging handler forwarding records to a SeverityLogger.
    """

    def __init__(self, logger: SeverityLogger, level: int = logging.NOTSET):
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self.format(record)
        except Exception:
            self.handleError(record)
            return
        self._logger.add(severity_for_levelno(record.levelno), text, record.name)
