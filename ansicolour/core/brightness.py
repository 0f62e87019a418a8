"""
Brightness normalization.

ANSI brightness codes do not overlap: ``{bright}{dim}foo`` renders bright,
not dim.  ``denormalize`` puts a ``{no brightness}`` reset in front of every
bright/dim code so the latest one wins, turning the example into
``{no brightness}{bright}{no brightness}{dim}foo``.  ``normalize`` removes
those resets again so a string can be re-wrapped.
"""
import re

from ansicolour._config import ESC, BRIGHT, DIM, NO_BRIGHTNESS

_BRIGHTNESS = rf"{re.escape(ESC)}\[(?:{BRIGHT}|{DIM})m"
_RESET = f"{ESC}[{NO_BRIGHTNESS}m"

_BRIGHTNESS_RE = re.compile(f"({_BRIGHTNESS})")
_RESET_BRIGHTNESS_RE = re.compile(f"{re.escape(_RESET)}({_BRIGHTNESS})")


def denormalize(s: str) -> str:
    return _BRIGHTNESS_RE.sub(_RESET + r"\1", s)


def normalize(s: str) -> str:
    return _RESET_BRIGHTNESS_RE.sub(r"\1", s)
