"""
Severity level vocabulary.

Levels are plain integer ordinals. The threshold rule is simple:

    message.level >= threshold  ->  message is shown

Untagged messages (level None) are never compared to the threshold; they
are gated by namespace enablement alone.

Level assignments:
    ──── chattier ──────────────────────── louder ──→
     0      1     2     3      4      5
    debug  info  warn  error  fatal  unknown
"""

from typing import Optional

from .colors import Colors


DEBUG = 0          # Internal state, step-by-step detail
INFO = 1           # Notable but expected events
WARN = 2           # Something looks off, work continues
ERROR = 3          # An operation failed
FATAL = 4          # The program cannot go on
UNKNOWN = 5        # Unclassified, always the loudest

LEVEL_TEXT = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'FATAL', 'UNKNOWN')

LEVEL_COLOR = (
    Colors.CYAN,
    Colors.GREEN,
    Colors.YELLOW,
    Colors.RED,
    Colors.LIGHT_RED,
    Colors.MAGENTA,
)


def normalize_level(level) -> Optional[int]:
    """Coerce a level argument to an ordinal in 0..5, or None.

    Integers outside the vocabulary are clamped. Level names are accepted
    case-insensitively. Anything else means "no level".
    """
    if level is None or isinstance(level, bool):
        return None
    if isinstance(level, int):
        return min(max(level, DEBUG), UNKNOWN)
    if isinstance(level, str):
        name = level.strip().upper()
        if name in LEVEL_TEXT:
            return LEVEL_TEXT.index(name)
    return None


def parse_level(value: Optional[str]) -> int:
    """Parse a LOG_LEVEL style value into a threshold ordinal.

    Unrecognized or missing values fall back to DEBUG (0), so nothing
    is suppressed by accident.
    """
    if value is None:
        return DEBUG
    if isinstance(value, int) and not isinstance(value, bool):
        return normalize_level(value)
    text = str(value).strip()
    if text.isdigit():
        return normalize_level(int(text))
    level = normalize_level(text)
    return DEBUG if level is None else level


def level_text(level: int) -> str:
    """Return the tag for a (normalized) level ordinal."""
    return LEVEL_TEXT[level]
