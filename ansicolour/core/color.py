"""
Resolved color — a foreground or background color plus optional brightness,
rendered to a CSS declaration.
"""
from dataclasses import dataclass
from typing import Optional

from ansicolour._config import (
    BRIGHT, DIM, CSS_COLORS, BRIGHT_CSS_COLORS, DIM_FALLBACK_CSS,
)


@dataclass(frozen=True)
class Color:
    """*name* ``None`` is the terminal default; *brightness* is an SGR
    brightness code (``BRIGHT`` / ``DIM``) or ``None``."""

    background: bool = False
    name: Optional[str] = None
    brightness: Optional[int] = None

    @property
    def inverse(self) -> "Color":
        """Swap the foreground/background role.

        A default color gets a concrete name so the swapped role stays
        visible: black for a foreground, white for a background.
        """
        name = self.name or ("white" if self.background else "black")
        return Color(not self.background, name, self.brightness)

    def to_css(self, inverted: bool = False, brightness: Optional[int] = None) -> str:
        color = self.inverse if inverted else self
        brightness = color.brightness or brightness

        palette = BRIGHT_CSS_COLORS if brightness == BRIGHT else CSS_COLORS
        rgb = palette.get(color.name) if color.name else None

        if rgb:
            prop = "background:" if color.background else "color:"
            alpha = 0.5 if brightness == DIM else 1
            return prop + "rgba(" + ",".join(str(c) for c in (*rgb, alpha)) + ");"
        if brightness == DIM:
            return DIM_FALLBACK_CSS
        return ""
