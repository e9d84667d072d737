"""
nsdebug.core — namespace filtered debug logging.

The reusable core of nsdebug:
- Glob-style namespace filters ('worker:*,db')
- A thread-safe Device shared by every namespace writing to one sink
- Immutable namespace handles with lazy message producers
- Stable per-namespace colors and elapsed times on terminals
- Function tracing decorator

Public API:
    Device             — shared sink owner
    init_device        — default device initialization
    get_device         — access default device
    Logger             — (device, namespace) handle
    NamespaceFilter    — compiled filter
    compile_filter     — compile a filter string
    ColorAssigner      — namespace color table
    LEVEL_TEXT         — level tag vocabulary
    trace              — function tracing decorator
"""

from .colors import ColorAssigner, Colors, NS_COLORS
from .device import Device, init_device, get_device
from .filters import NamespaceFilter, compile_filter
from .levels import (
    DEBUG, INFO, WARN, ERROR, FATAL, UNKNOWN, LEVEL_TEXT, parse_level,
)
from .logger import Logger
from .trace import trace

__all__ = [
    'Device', 'init_device', 'get_device',
    'Logger',
    'NamespaceFilter', 'compile_filter',
    'ColorAssigner', 'Colors', 'NS_COLORS',
    'DEBUG', 'INFO', 'WARN', 'ERROR', 'FATAL', 'UNKNOWN', 'LEVEL_TEXT',
    'parse_level',
    'trace',
]
