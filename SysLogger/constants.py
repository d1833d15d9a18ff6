import os
import syslog
from enum import IntEnum
from typing import Dict, Optional


# SEVERITIES
class Severity(IntEnum):
    DEBUG = 0  # developer diagnostics
    INFO = 1  # normal operation
    WARN = 2  # unexpected but recoverable
    ERROR = 3  # operation failed
    FATAL = 4  # process cannot continue
    UNKNOWN = 5  # most urgent, always emitted


# application severity -> syslog priority, intentionally not a 1:1 name match
PRIORITY_MAP: Dict[Severity, int] = {
    Severity.DEBUG: syslog.LOG_DEBUG,
    Severity.INFO: syslog.LOG_INFO,
    Severity.WARN: syslog.LOG_NOTICE,
    Severity.ERROR: syslog.LOG_WARNING,
    Severity.FATAL: syslog.LOG_ERR,
    Severity.UNKNOWN: syslog.LOG_ALERT,
}

FACILITIES: Dict[str, int] = {
    "kern": syslog.LOG_KERN,
    "user": syslog.LOG_USER,
    "mail": syslog.LOG_MAIL,
    "daemon": syslog.LOG_DAEMON,
    "auth": syslog.LOG_AUTH,
    "syslog": syslog.LOG_SYSLOG,
    "lpr": syslog.LOG_LPR,
    "news": syslog.LOG_NEWS,
    "uucp": syslog.LOG_UUCP,
    "cron": syslog.LOG_CRON,
    "local0": syslog.LOG_LOCAL0,
    "local1": syslog.LOG_LOCAL1,
    "local2": syslog.LOG_LOCAL2,
    "local3": syslog.LOG_LOCAL3,
    "local4": syslog.LOG_LOCAL4,
    "local5": syslog.LOG_LOCAL5,
    "local6": syslog.LOG_LOCAL6,
    "local7": syslog.LOG_LOCAL7,
}

OPTION_FLAGS: Dict[str, int] = {
    "pid": syslog.LOG_PID,
    "cons": syslog.LOG_CONS,
    "ndelay": syslog.LOG_NDELAY,
    "nowait": syslog.LOG_NOWAIT,
    "perror": syslog.LOG_PERROR,
}

DEFAULT_OPTIONS = syslog.LOG_PID | syslog.LOG_CONS
DEFAULT_LEVEL = Severity.DEBUG


def get_severity(name: str, default: Severity = DEFAULT_LEVEL) -> Severity:
    """
    Resolves a severity name such as "warn" to its Severity member.
    """
    names = [severity.name.lower() for severity in Severity]
    if name.lower() not in names:
        print(f"Incorrect log level use: {names}")
        return default
    return Severity[name.upper()]


def get_log_level() -> Severity:
    value = os.environ.get("SYSLOGGER_LEVEL", "")
    if not value:
        return DEFAULT_LEVEL
    return get_severity(value)


def get_facility() -> Optional[int]:
    """
    Retrieves the syslog facility from the environment, None leaves it unset.
    """
    value = os.environ.get("SYSLOGGER_FACILITY", "").strip().lower()
    if not value:
        return None
    if value not in FACILITIES:
        print(f"Incorrect facility use: {list(FACILITIES)}")
        return None
    return FACILITIES[value]


def get_options() -> int:
    """
    Combines comma separated option names (pid,cons,...) into a syslog bitmask.
    """
    value = os.environ.get("SYSLOGGER_OPTIONS", "")
    options = 0
    for name in value.split(","):
        name = name.strip().lower()
        if not name:
            continue
        if name not in OPTION_FLAGS:
            print(f"Incorrect option use: {list(OPTION_FLAGS)}")
            continue
        options |= OPTION_FLAGS[name]
    return options or DEFAULT_OPTIONS


# SYSLOGGER
LOG_IDENT = os.environ.get("SYSLOGGER_IDENT", "")
LOG_LEVEL = get_log_level()
LOG_FACILITY = get_facility()
LOG_OPTIONS = get_options()

# DIAGNOSTICS
DIAG_LOGGER_NAME = "syslogger"
DIAG_FORMAT = "<%(levelno)s>%(asctime)s: %(message)s"
DIAG_DATEFMT = "%b %d %H:%M:%S"

VERSION = "1.2.6"


def test_constants_values():
    """
    Tests the constants values.
    """
    missing = [severity for severity in Severity if severity not in PRIORITY_MAP]
    assert not missing, f"PRIORITY_MAP has no priority for {missing}"
    assert LOG_LEVEL in Severity, f"LOG_LEVEL={LOG_LEVEL} is not a severity"


test_constants_values()
