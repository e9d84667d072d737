"""
Line formatting for plain and terminal output.

Plain lines favor absolute, grep-able timestamps:

    2026-10-17 09:30:12 +0200 4242 [worker:a] WARN disk almost full

Terminal lines favor the time since the previous line:

    ESC[1;36mworker:aESC[0m ESC[0;33mWARNESC[0m ESC[0;37mdisk almost fullESC[0m +12ms

All functions here are pure.
"""

from datetime import datetime
from typing import Optional

from .colors import MSG_COLOR, colorize
from .levels import LEVEL_COLOR, LEVEL_TEXT


TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S %z'


def format_timestamp(now: datetime) -> str:
    """Render a timestamp as 'YYYY-MM-DD HH:MM:SS +ZZZZ'."""
    if now.tzinfo is None:
        now = now.astimezone()
    return now.strftime(TIMESTAMP_FORMAT)


def elapsed_text(seconds: float) -> str:
    """Render an elapsed duration as '+<n>ms', '+<n>s' or '+<n>m'.

    Values are truncated, never rounded: 59.999s is '+59s'.
    Negative durations (clock stepped back) render as '+0ms'.
    """
    if seconds <= 0:
        return '+0ms'
    if seconds >= 60:
        return f"+{int(seconds // 60)}m"
    if seconds >= 1:
        return f"+{int(seconds)}s"
    # Nudge past float error so 0.999s is 999ms, not 998ms
    return f"+{int(seconds * 1000 + 1e-6)}ms"


def format_plain(timestamp: str, namespace: Optional[str], level: Optional[int],
                 message, pid: Optional[int] = None) -> str:
    """Build a plain line: '<ts> [pid] [[namespace]] [LEVEL] <message>'."""
    parts = [timestamp]
    if pid is not None:
        parts.append(str(pid))
    if namespace:
        parts.append(f"[{namespace}]")
    if level is not None:
        parts.append(LEVEL_TEXT[level])
    parts.append(str(message))
    return ' '.join(parts)


def format_colored(message, namespace: Optional[str] = None,
                   namespace_color: Optional[str] = None,
                   level: Optional[int] = None,
                   elapsed: str = '+0ms') -> str:
    """Build a colored line: '<ns> <LEVEL> <message> +<elapsed>'.

    The namespace and level segments are each wrapped in their own color
    and dropped when absent.
    """
    parts = []
    if namespace:
        parts.append(colorize(namespace, namespace_color or MSG_COLOR))
    if level is not None:
        parts.append(colorize(LEVEL_TEXT[level], LEVEL_COLOR[level]))
    parts.append(colorize(str(message), MSG_COLOR))
    parts.append(elapsed)
    return ' '.join(parts)
