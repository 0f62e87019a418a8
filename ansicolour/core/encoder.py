"""
Encoders — wrap plain text in the SGR codes of a named color or style.

Every color gets three encoders (``red``, ``bg_red``, ``bg_bright_red``),
every style one (``bright``, ``dim``, ``italic``, ``underline``,
``inverse``).  Callers look them up by name in ``ENCODERS``.

Wrapping is nesting-safe: any close code of the same kind inside the text
is replaced by the open code, so ``red("a" + blue("b") + "c")`` keeps "c"
red.
"""
from typing import Callable, Dict

from ansicolour._config import (
    COLOR_NAMES, STYLE_NAMES,
    FG_BASE, BG_BASE, BG_BRIGHT_BASE, UNSTYLE_BASE,
    BRIGHT, DIM, NO_BRIGHTNESS, NO_COLOR, NO_BG_COLOR,
)
from ansicolour.core.brightness import normalize, denormalize
from ansicolour.core.code import Code

Encoder = Callable[[str], str]


def wrap(open_code: int, close_code: int) -> Encoder:
    """Return a function that brackets text in *open_code* / *close_code*."""
    open_str = Code.to_str(open_code)
    close_str = Code.to_str(close_code)

    def encode(text: str) -> str:
        text = normalize(text)
        if close_str:
            text = text.replace(close_str, open_str)
        return denormalize(open_str + text + close_str)

    encode.__name__ = f"wrap_{open_code}_{close_code}"
    return encode


def _style_close_code(index: int) -> int:
    if index in (BRIGHT, DIM):
        return NO_BRIGHTNESS
    return UNSTYLE_BASE + index


def _build_encoders() -> Dict[str, Encoder]:
    encoders: Dict[str, Encoder] = {}
    for i, name in enumerate(COLOR_NAMES):
        if not name:
            continue
        encoders[name] = wrap(FG_BASE + i, NO_COLOR)
        encoders[f"bg_{name}"] = wrap(BG_BASE + i, NO_BG_COLOR)
        encoders[f"bg_bright_{name}"] = wrap(BG_BRIGHT_BASE + i, NO_BG_COLOR)
    for i, name in enumerate(STYLE_NAMES):
        if not name:
            continue
        encoders[name] = wrap(i, _style_close_code(i))
    return encoders


ENCODERS: Dict[str, Encoder] = _build_encoders()


def get_encoder(name: str) -> Encoder:
    """Look up an encoder by name (``"red"``, ``"bg_bright_cyan"``, ``"dim"`` …).

    :raises ValueError: if *name* is not a known color or style.
    """
    try:
        return ENCODERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown color/style {name!r}; expected one of: {', '.join(ENCODERS)}"
        ) from None


def encode(name: str, text: str) -> str:
    return get_encoder(name)(text)


def paint(text: str, *names: str) -> str:
    """Apply several encoders, the first name innermost.

    ``paint("hi", "red", "underline")`` == ``underline(red("hi"))``.
    """
    for name in names:
        text = encode(name, text)
    return text
