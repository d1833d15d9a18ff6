import logging

from SysLogger.Logger import get_logger


def test_get_logger():
    logger = get_logger()
    assert logger.name == "syslogger"
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_get_logger_adds_handler_once():
    get_logger()
    logger = get_logger()
    assert len(logger.handlers) == 1


def test_format():
    handler = get_logger().handlers[0]
    record = logging.LogRecord("syslogger", 40, __file__, 1, "write failed", None, None)
    assert handler.format(record).startswith("<40>")
    assert handler.format(record).endswith(": write failed")
