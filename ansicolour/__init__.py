"""ansicolour — ANSI SGR escape codes ⇄ structured spans ⇄ CSS."""
from importlib.metadata import version, PackageNotFoundError

from .core.code import Code, CodeType
from .core.color import Color
from .core.brightness import normalize, denormalize
from .core.colors import Colors, Span, StyledSpan, parse, resolve
from .core.encoder import ENCODERS, wrap, encode, get_encoder, paint
from .utils.ansi_utils import to_html, strip_ansi

try:
    __version__ = version("ansicolour")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Code", "CodeType", "Color", "Colors", "Span", "StyledSpan",
    "parse", "resolve", "normalize", "denormalize",
    "ENCODERS", "wrap", "encode", "get_encoder", "paint",
    "to_html", "strip_ansi",
]
