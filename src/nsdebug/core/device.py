"""
Device — the shared, thread-safe owner of an output sink.

A Device holds everything namespaces logging to the same sink must agree
on: the compiled namespace filter, the namespace color table and the time
of the last written line. Handles (see logger.py) are cheap values that
point at a Device; the Device does the writing.

Every Device.log() call runs one critical section:

    now -> elapsed since last line -> namespace color -> render
        -> write + flush -> remember now

so colors are never assigned twice and elapsed times are measured against
the line that was actually written before this one.

Configuration read at construction when not passed explicitly:
    DEBUG       namespace filter (absent = nothing enabled)
    LOG_LEVEL   minimum level for level-tagged calls (absent = DEBUG)
    NO_COLOR    any non-empty value turns off terminal colors
"""

import os
import sys
import threading
from datetime import datetime
from typing import Callable, Mapping, Optional, TextIO

from .colors import ColorAssigner
from .filters import NamespaceFilter, compile_filter
from .formatter import elapsed_text, format_colored, format_plain, format_timestamp
from .levels import normalize_level, parse_level
from .logger import Logger


def _local_now() -> datetime:
    return datetime.now().astimezone()


def sink_is_tty(io) -> bool:
    """True if the sink reports itself as an interactive terminal."""
    isatty = getattr(io, 'isatty', None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed file objects raise ValueError from isatty()
        return False


class PlainRenderer:
    """Renders '<timestamp> <pid> [ns] LEVEL message' lines."""

    colored = False

    def __init__(self, show_pid: bool = True):
        self.show_pid = show_pid

    def render(self, message, namespace, level, now, elapsed, colors):
        pid = os.getpid() if self.show_pid else None
        return format_plain(format_timestamp(now), namespace, level, message, pid=pid)


class ColorRenderer:
    """Renders ANSI-colored lines with an elapsed-time suffix."""

    colored = True

    def render(self, message, namespace, level, now, elapsed, colors):
        ns_color = colors.color_for(namespace) if namespace else None
        return format_colored(message, namespace, ns_color, level,
                              elapsed_text(elapsed))


class Device:
    """Thread-safe line writer shared by many namespace handles.

    Usage::

        device = Device(sys.stderr, filter='worker:*')
        device.log('starting')                   # root namespace
        device.log('job done', 'worker:a', 1)    # INFO on worker:a
        log = device.on('worker').on('b')        # handle for worker:b
        log.warn('slow job')
    """

    def __init__(
        self,
        io: TextIO = None,
        *,
        filter: Optional[str] = None,
        level=None,
        color: Optional[bool] = None,
        show_pid: bool = True,
        clock: Callable[[], datetime] = None,
        environ: Mapping[str, str] = None,
    ):
        self.io = io if io is not None else sys.stderr
        if not callable(getattr(self.io, 'write', None)):
            raise TypeError(f"output sink must have a write() method: {self.io!r}")
        env = os.environ if environ is None else environ

        if filter is None:
            filter = env.get('DEBUG')
        self._filter: NamespaceFilter = compile_filter(filter)

        if level is None:
            level = env.get('LOG_LEVEL')
        self._level_threshold = parse_level(level)

        if color is None:
            color = sink_is_tty(self.io) and not env.get('NO_COLOR')
        self._renderer = ColorRenderer() if color else PlainRenderer(show_pid)

        self._clock = clock or _local_now
        self._lock = threading.Lock()
        self._colors = ColorAssigner()
        self._prev_time: Optional[datetime] = None

    # -----------------------------------------------------------------
    # Filter
    # -----------------------------------------------------------------
    @property
    def filter(self) -> NamespaceFilter:
        return self._filter

    def enable(self, filter_string: Optional[str]) -> NamespaceFilter:
        """Replace the namespace filter.

        The new filter is compiled first and swapped in with a single
        assignment, so readers see either the old or the new rule set.
        """
        new_filter = compile_filter(filter_string)
        self._filter = new_filter
        return new_filter

    def enabled_for(self, namespace: Optional[str]) -> bool:
        """True if the current filter enables the namespace."""
        return self._filter.matches(namespace)

    # -----------------------------------------------------------------
    # Level threshold
    # -----------------------------------------------------------------
    @property
    def level_threshold(self) -> int:
        return self._level_threshold

    @level_threshold.setter
    def level_threshold(self, value) -> None:
        self._level_threshold = parse_level(value)

    # -----------------------------------------------------------------
    # Output
    # -----------------------------------------------------------------
    @property
    def colored(self) -> bool:
        """True if lines are rendered for a terminal."""
        return self._renderer.colored

    @property
    def colors(self):
        """Snapshot of the namespace -> color table."""
        with self._lock:
            return self._colors.assigned

    def log(self, message, namespace: Optional[str] = None, level=None) -> None:
        """Write one line for message.

        No filtering happens here; handles check enablement before calling.
        Errors raised by the sink propagate to the caller.
        """
        if message is None:
            return
        level = normalize_level(level)
        if namespace is not None:
            namespace = str(namespace)

        with self._lock:
            now = self._clock()
            if self._prev_time is None:
                elapsed = 0.0
            else:
                elapsed = max((now - self._prev_time).total_seconds(), 0.0)
            line = self._renderer.render(message, namespace, level, now,
                                         elapsed, self._colors)
            self.io.write(line + '\n')
            # The line is in the sink once write() returns, even if flush fails
            self._prev_time = now
            flush = getattr(self.io, 'flush', None)
            if flush is not None:
                flush()

    def __lshift__(self, message):
        self.log(message)
        return self

    def on(self, namespace):
        """Return a handle logging to this device under namespace."""
        return Logger(self, namespace)

    def __repr__(self):
        kind = 'tty' if self.colored else 'plain'
        return f"Device({self.io!r}, {kind}, filter={str(self._filter)!r})"


# =============================================================================
# Module-level default device
# =============================================================================

_device: Optional[Device] = None
_device_lock = threading.Lock()


def init_device(io: TextIO = None, **kwargs) -> Device:
    """Initialize the module-level default Device.

    Call once at program startup, after the environment is loaded.
    Accepts the same arguments as Device().

    Returns:
        The initialized Device instance
    """
    global _device
    device = Device(io, **kwargs)
    with _device_lock:
        _device = device
    return device


def get_device() -> Device:
    """Get the module-level Device, creating a default one if needed."""
    global _device
    with _device_lock:
        if _device is None:
            _device = Device()
        return _device
