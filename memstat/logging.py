# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Replacement logging module.

This module is light, and sends messages to the system's syslog service. Log
destination configuration should be done there. Nothing is written to stdout,
which belongs to the report.

Configurable with the following environment variables:

MEMSTAT_LOG_FACILITY
    Sets the syslog facility to use, default USER.

MEMSTAT_LOG_PRIORITY
    Sets the syslog priority to log, default NOTICE.

MEMSTAT_LOG_STDERR
    Set to include stderr in log output.

When this module is imported it sets up a syslog handler on the stock logging
module's root logger, so third-party packages log to the same place.
"""

import logging
import os
import sys
import syslog
import traceback

FACILITY: str = os.environ.get("MEMSTAT_LOG_FACILITY", "USER").upper()
PRIORITY: str = os.environ.get("MEMSTAT_LOG_PRIORITY", "NOTICE").upper()
USESTDERR: bool = bool(os.environ.get("MEMSTAT_LOG_STDERR"))


def openlog(ident=None, usestderr=USESTDERR, facility=FACILITY):
    """Open the syslog logger.

  Args:
    ident: log identifier, usually prefixes messages.
    usestderr: also log to stderr stream.
    facility: the logging facility to use. See syslog(1)
  """
    opts = syslog.LOG_PID | (syslog.LOG_PERROR if usestderr else 0)
    if isinstance(facility, str):
        facility = getattr(syslog, "LOG_" + facility.upper())
    if ident is None:  # openlog does not take None as an ident parameter.
        syslog.openlog(logoption=opts, facility=facility)
    else:
        syslog.openlog(ident=ident, logoption=opts, facility=facility)


def debug(msg, *args):
    """Send a log message at DEBUG priority."""
    if get_priority() >= syslog.LOG_DEBUG:
        syslog.syslog(syslog.LOG_DEBUG, _encode(msg, args))


def info(msg, *args):
    """Send a log message at INFO priority."""
    if get_priority() >= syslog.LOG_INFO:
        syslog.syslog(syslog.LOG_INFO, _encode(msg, args))


def warning(msg, *args):
    """Send a log message at WARNING priority."""
    if get_priority() >= syslog.LOG_WARNING:
        syslog.syslog(syslog.LOG_WARNING, _encode(msg, args))


def error(msg, *args):
    """Send a log message at ERROR priority."""
    if get_priority() >= syslog.LOG_ERR:
        syslog.syslog(syslog.LOG_ERR, _encode(msg, args))


def _encode(o, args):
    msg = str(o)
    if args:
        try:
            msg = msg % args
        except TypeError:
            msg = msg + " had format TypeError: " + str(args)
    # Add UTF8 BOM to message per RFC-5424. str is UTF-8 encoded by syslog module.
    return "\ufeff" + msg.replace("\r\n", " ")


def set_priority(level):
    """Set syslog priority.

  Args:
      level: syslog.LOG_* level.
  """
    syslog.setlogmask(syslog.LOG_UPTO(level))
    logging.root.level = _LOGGING_LEVELS[PRIORITIES_REV[level]]


def get_priority():
    """Get max syslog priority."""
    mask = syslog.setlogmask(0)
    for level in (
            syslog.LOG_DEBUG,
            syslog.LOG_INFO,
            syslog.LOG_NOTICE,
            syslog.LOG_WARNING,
            syslog.LOG_ERR,
            syslog.LOG_CRIT,
            syslog.LOG_ALERT,
            syslog.LOG_EMERG,
    ):
        if syslog.LOG_MASK(level) & mask:
            return level
    return syslog.LOG_DEBUG


def exception_warning(prefix, ex, *args):
    """Log a compact exception at WARNING priority."""
    msg = _encode(prefix, args)
    warning(f"{msg}: {_format_exception(ex)}")


def _format_exception(ex):
    return " | ".join([line.strip() for line in traceback.format_exception_only(ex)])


# Allow use of names, and useful aliases, to select logging level.
PRIORITIES = {
    "DEBUG": syslog.LOG_DEBUG,
    "INFO": syslog.LOG_INFO,
    "NOTICE": syslog.LOG_NOTICE,
    "WARNING": syslog.LOG_WARNING,
    "WARN": syslog.LOG_WARNING,
    "ERR": syslog.LOG_ERR,
    "ERROR": syslog.LOG_ERR,
    "CRIT": syslog.LOG_CRIT,
    "CRITICAL": syslog.LOG_CRIT,
    "ALERT": syslog.LOG_ALERT,
}
PRIORITIES_REV = dict((v, k) for k, v in PRIORITIES.items())


# Stock logging module compatibility objects.

# Rough guess at mapping to logging module levels.
_LOGGING_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.DEBUG,
    "NOTICE": logging.ERROR,
    "WARNING": logging.CRITICAL,
    "WARN": logging.CRITICAL,
    "ERR": logging.ERROR,
    "ERROR": logging.ERROR,
    "CRIT": logging.FATAL,
    "CRITICAL": logging.FATAL,
    "ALERT": logging.FATAL,
}

_LEVEL_MAP = {
    logging.CRITICAL: syslog.LOG_CRIT,
    logging.ERROR: syslog.LOG_ERR,
    logging.WARNING: syslog.LOG_WARNING,
    logging.INFO: syslog.LOG_INFO,
    logging.DEBUG: syslog.LOG_DEBUG,
}


class SyslogHandler(logging.Handler):
    """Stock logging module handler to delegate to this module, thus syslog."""

    def emit(self, record):
        try:
            msg = record.getMessage()
            syslog.syslog(_LEVEL_MAP.get(record.levelno, syslog.LOG_INFO),
                          _encode(f"{record.name}: {msg}", ()))
        except Exception:  # noqa
            self.handleError(record)


def _setup():
    openlog(os.path.basename(sys.argv[0]) or "memstat")
    set_priority(PRIORITIES.get(PRIORITY, syslog.LOG_NOTICE))
    if not any(isinstance(h, SyslogHandler) for h in logging.root.handlers):
        logging.root.addHandler(SyslogHandler())


_setup()
