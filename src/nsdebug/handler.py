"""Bridge from the standard library logging module.

Routes logging records through a Device so that third-party libraries
using logging.getLogger() are filtered like everything else:

    logging.getLogger().addHandler(NamespaceHandler(device))
    logging.getLogger('app.db').warning('slow query')
    # shown when DEBUG matches 'app:db', tagged WARN

Logger names map to namespaces by replacing '.' with ':'; the root logger
maps to the root namespace. Records are level-tagged and therefore also
subject to the device's LOG_LEVEL threshold.
"""

import logging
from typing import Optional

from nsdebug.core.device import get_device
from nsdebug.core.levels import DEBUG, ERROR, FATAL, INFO, UNKNOWN, WARN


def namespace_for(logger_name: str) -> Optional[str]:
    """Map a logging logger name to a namespace (None for the root)."""
    if not logger_name or logger_name == 'root':
        return None
    return logger_name.replace('.', ':')


def level_for(levelno: int) -> int:
    """Map a logging level number to a level ordinal."""
    if levelno < logging.INFO:
        return DEBUG
    if levelno < logging.WARNING:
        return INFO
    if levelno < logging.ERROR:
        return WARN
    if levelno < logging.CRITICAL:
        return ERROR
    if levelno == logging.CRITICAL:
        return FATAL
    return UNKNOWN


class NamespaceHandler(logging.Handler):
    """logging.Handler writing records through namespace handles."""

    def __init__(self, device=None, level=logging.NOTSET):
        super().__init__(level)
        self.device = device
        # Records carry their own level, namespace and time; default to the bare message
        self.setFormatter(logging.Formatter('%(message)s'))

    def emit(self, record: logging.LogRecord) -> None:
        device = self.device if self.device is not None else get_device()
        log = device.on(namespace_for(record.name))
        try:
            log.log(lambda: self.format(record), level=level_for(record.levelno))
        except Exception:
            self.handleError(record)
