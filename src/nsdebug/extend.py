"""Per-class namespace loggers.

    class Worker:
        log = attach_logger('worker')

        def run(self):
            self.log.info('running')     # [worker] INFO running

    Worker.log.debug('class-level access works too')

The handle is built once, on first access, from the device given to
attach_logger() or the default device at that moment.
"""

import threading

from nsdebug.core.device import get_device
from nsdebug.core.logger import Logger


class LoggerField:
    """Descriptor holding one memoized Logger for a namespace."""

    def __init__(self, namespace, device=None):
        self.namespace = namespace
        self.device = device
        self._logger = None
        self._lock = threading.Lock()

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None) -> Logger:
        if self._logger is None:
            with self._lock:
                if self._logger is None:
                    device = self.device if self.device is not None else get_device()
                    self._logger = device.on(self.namespace)
        return self._logger

    def __set__(self, instance, value):
        raise AttributeError(f"logger field {getattr(self, 'name', '?')!r} is read-only")


def attach_logger(namespace, device=None) -> LoggerField:
    """Declare a class attribute holding a Logger for namespace."""
    return LoggerField(namespace, device)
