"""nsdebug — namespace filtered debug logging.

Tag messages with a colon-delimited namespace and choose at runtime which
namespaces print, with a glob filter in the DEBUG environment variable:

    import nsdebug

    log = nsdebug.create('worker')
    log.on('a').info('picked up job 17')

    $ DEBUG='worker:*' python app.py
"""

from nsdebug._version import __version__, __app_name__
from nsdebug.core import (
    Device, init_device, get_device,
    Logger,
    NamespaceFilter, compile_filter,
    DEBUG, INFO, WARN, ERROR, FATAL, UNKNOWN, LEVEL_TEXT,
    trace,
)
from nsdebug.extend import attach_logger
from nsdebug.handler import NamespaceHandler


def create(namespace=None, io=None, **device_kwargs):
    """Create a Device over io (default: stderr) and return a handle on it.

    Terminal sinks get colored output with elapsed times, anything else
    gets timestamped plain lines.
    """
    return Device(io, **device_kwargs).on(namespace)


__all__ = [
    "__version__", "__app_name__",
    "create",
    "Device", "init_device", "get_device",
    "Logger",
    "NamespaceFilter", "compile_filter",
    "DEBUG", "INFO", "WARN", "ERROR", "FATAL", "UNKNOWN", "LEVEL_TEXT",
    "trace", "attach_logger", "NamespaceHandler",
]
