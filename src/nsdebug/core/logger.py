"""
Logger — an immutable (device, namespace) handle.

Handles are what application code holds. They are cheap to create and
never change; on() returns a new handle with a longer namespace:

    log = device.on('worker')       # worker
    job = log.on('a')               # worker:a
    job.log('started')
    job.debug(lambda: expensive_dump())   # only called when enabled

Gating, in order:
    1. namespace enablement (Device filter, checked without locking)
    2. level threshold, for level-tagged calls only
Only then is a message producer invoked and the line handed to the Device.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .levels import DEBUG, ERROR, FATAL, INFO, UNKNOWN, WARN, normalize_level


@dataclass(frozen=True)
class Logger:
    """Namespace handle over a shared Device.

    Attributes:
        device: The Device lines are written to (shared, not owned)
        namespace: Colon-joined namespace path, None for the root
    """
    device: Any
    namespace: Optional[str] = None

    def __post_init__(self):
        if self.namespace is not None:
            object.__setattr__(self, 'namespace', str(self.namespace))

    def __eq__(self, other):
        if not isinstance(other, Logger):
            return NotImplemented
        return self.device is other.device and self.namespace == other.namespace

    def __hash__(self):
        return hash((id(self.device), self.namespace))

    def on(self, namespace) -> 'Logger':
        """Return a handle for a sub-namespace of this one.

        on(None) adds no segment and returns this handle.
        """
        if namespace is None:
            return self
        if self.namespace:
            namespace = f"{self.namespace}:{namespace}"
        return Logger(self.device, namespace)

    @property
    def enabled(self) -> bool:
        """True if the device's current filter enables this namespace."""
        return self.device.enabled_for(self.namespace)

    def log(self, message=None, producer: Callable[[], Any] = None,
            level=None) -> None:
        """Log a message, or the result of producer(), if enabled.

        A callable message is treated as the producer. When both a message
        and a producer are given the message wins and the producer is not
        called. With neither, nothing happens.
        """
        if producer is None and callable(message):
            message, producer = None, message
        if message is None and producer is None:
            return
        if not self.enabled:
            return
        level = normalize_level(level)
        if level is not None and level < self.device.level_threshold:
            return
        if message is None:
            message = producer()
            if message is None:
                return
        self.device.log(message, self.namespace, level)

    def __lshift__(self, message):
        self.log(message)
        return self

    def debug(self, message=None, producer=None) -> None:
        self.log(message, producer, DEBUG)

    def info(self, message=None, producer=None) -> None:
        self.log(message, producer, INFO)

    def warn(self, message=None, producer=None) -> None:
        self.log(message, producer, WARN)

    def error(self, message=None, producer=None) -> None:
        self.log(message, producer, ERROR)

    def fatal(self, message=None, producer=None) -> None:
        self.log(message, producer, FATAL)

    def unknown(self, message=None, producer=None) -> None:
        self.log(message, producer, UNKNOWN)
