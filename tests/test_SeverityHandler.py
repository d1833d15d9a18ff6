import logging
import syslog
import pytest

from SysLogger.constants import Severity
from SysLogger.SeverityHandler import SeverityHandler, severity_for_levelno
from SysLogger.SeverityLogger import SeverityLogger


class RecordingFacility:
    def __init__(self, ident, options, facility):
        self.writes = []

    def set_mask(self, priority):
        pass

    def write(self, priority, text):
        self.writes.append((priority, text))


@pytest.fixture
def std_logger():
    sys_logger = SeverityLogger("svc", opener=RecordingFacility)
    handler = SeverityHandler(sys_logger)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger = logging.getLogger("tests.severity_handler")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(handler)
    yield logger, sys_logger
    logger.removeHandler(handler)


def test_severity_for_levelno():
    assert severity_for_levelno(5) == Severity.DEBUG
    assert severity_for_levelno(logging.DEBUG) == Severity.DEBUG
    assert severity_for_levelno(logging.INFO) == Severity.INFO
    assert severity_for_levelno(logging.WARNING) == Severity.WARN
    assert severity_for_levelno(45) == Severity.ERROR
    assert severity_for_levelno(logging.CRITICAL) == Severity.FATAL
    assert severity_for_levelno(60) == Severity.UNKNOWN


def test_records_are_forwarded(std_logger):
    logger, sys_logger = std_logger
    logger.warning("disk at 91%")
    assert sys_logger._handle.writes == [
        (syslog.LOG_NOTICE, "tests.severity_handler: disk at 91%%")
    ]


def test_forwarded_records_are_gated(std_logger):
    logger, sys_logger = std_logger
    sys_logger.set_level(Severity.ERROR)
    logger.info("dropped")
    logger.critical("kept")
    assert sys_logger._handle.writes == [
        (syslog.LOG_ERR, "tests.severity_handler: kept")
    ]


def test_format_error_is_handled(std_logger, mocker):
    logger, sys_logger = std_logger
    handler = logger.handlers[0]
    handle_error = mocker.patch.object(handler, "handleError")
    logger.error("%d items", "many")
    handle_error.assert_called_once()
    assert sys_logger._handle.writes == []
