"""
ANSI color codes and per-namespace color assignment.

Colors are SGR parameter strings ("1;36"), wrapped by colorize() as
ESC[<code>m<text>ESC[0m.
"""

from typing import Dict


class Colors:
    """SGR codes for the 16 basic terminal colors."""
    DEFAULT = '0;0'
    BLACK = '0;30'
    RED = '0;31'
    GREEN = '0;32'
    YELLOW = '0;33'
    BLUE = '0;34'
    MAGENTA = '0;35'
    CYAN = '0;36'
    WHITE = '0;37'
    LIGHT_BLACK = '1;30'
    LIGHT_RED = '1;31'
    LIGHT_GREEN = '1;32'
    LIGHT_YELLOW = '1;33'
    LIGHT_BLUE = '1;34'
    LIGHT_MAGENTA = '1;35'
    LIGHT_CYAN = '1;36'
    LIGHT_WHITE = '1;37'


# Namespace palette, handed out in first-seen order and reused cyclically
NS_COLORS = (
    Colors.LIGHT_CYAN,
    Colors.LIGHT_GREEN,
    Colors.LIGHT_YELLOW,
    Colors.LIGHT_BLUE,
    Colors.LIGHT_MAGENTA,
    Colors.LIGHT_CYAN,
    Colors.LIGHT_RED,
    Colors.CYAN,
    Colors.GREEN,
    Colors.YELLOW,
    Colors.BLUE,
    Colors.MAGENTA,
    Colors.CYAN,
    Colors.RED,
)

MSG_COLOR = Colors.WHITE

RESET = '\033[0m'


def colorize(text: str, color: str) -> str:
    """Wrap text in an SGR color sequence and a reset."""
    return f"\033[{color}m{text}{RESET}"


class ColorAssigner:
    """Namespace -> color table, filled lazily in first-seen order.

    Not thread-safe on its own: the owning Device only calls color_for()
    while holding its lock.

    Usage::

        colors = ColorAssigner()
        colors.color_for('db')       # NS_COLORS[0]
        colors.color_for('http')     # NS_COLORS[1]
        colors.color_for('db')       # NS_COLORS[0] again
    """

    def __init__(self, palette=NS_COLORS):
        if not palette:
            raise ValueError("color palette must not be empty")
        self.palette = tuple(palette)
        self._colors: Dict[str, str] = {}

    def color_for(self, namespace: str) -> str:
        color = self._colors.get(namespace)
        if color is None:
            color = self.palette[len(self._colors) % len(self.palette)]
            self._colors[namespace] = color
        return color

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, namespace) -> bool:
        return namespace in self._colors

    @property
    def assigned(self) -> Dict[str, str]:
        """Copy of the namespace -> color table, in assignment order."""
        return dict(self._colors)
