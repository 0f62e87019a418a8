"""
Tests for ansicolour.core.encoder — wrap functions and the name mapping.
"""
import pytest

from ansicolour._config import DIM_FALLBACK_CSS
from ansicolour.core.colors import resolve
from ansicolour.core.encoder import ENCODERS, wrap, encode, get_encoder, paint

ESC = "\u001b"


def sgr(*codes):
    return "".join(f"{ESC}[{c}m" for c in codes)


@pytest.mark.parametrize("name, expected", [
    ("red", sgr(31) + "hi" + sgr(39)),
    ("bg_red", sgr(41) + "hi" + sgr(49)),
    ("bg_bright_red", sgr(101) + "hi" + sgr(49)),
    ("white", sgr(37) + "hi" + sgr(39)),
    ("italic", sgr(3) + "hi" + sgr(23)),
    ("underline", sgr(4) + "hi" + sgr(24)),
    ("inverse", sgr(7) + "hi" + sgr(27)),
    ("bright", sgr(22, 1) + "hi" + sgr(22)),
    ("dim", sgr(22, 2) + "hi" + sgr(22)),
])
def test_single_wrap(name, expected):
    assert ENCODERS[name]("hi") == expected


def test_wrap_bright_literal():
    assert wrap(1, 22)("hi") == "\u001b[22m\u001b[1mhi\u001b[22m"


def test_encoder_names():
    colors = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white", "default"]
    expected = set(colors)
    expected |= {f"bg_{c}" for c in colors}
    expected |= {f"bg_bright_{c}" for c in colors}
    expected |= {"bright", "dim", "italic", "underline", "inverse"}
    assert set(ENCODERS) == expected


def test_nested_close_reopens_outer():
    red, blue = ENCODERS["red"], ENCODERS["blue"]
    s = red("a" + blue("b") + "c")
    assert s == sgr(31) + "a" + sgr(34) + "b" + sgr(31) + "c" + sgr(39)
    assert [(x.text, x.css) for x in resolve(s)] == [
        ("a", "color:rgba(196,26,22,1);"),
        ("b", "color:rgba(28,0,207,1);"),
        ("c", "color:rgba(196,26,22,1);"),
    ]


def test_same_wrap_twice_keeps_style():
    red = ENCODERS["red"]
    s = red("x" + red("y") + "z")
    assert sgr(39) not in s[:-len(sgr(39))]
    assert all(span.css == "color:rgba(196,26,22,1);" for span in resolve(s))


def test_bright_inside_dim():
    dim, bright = ENCODERS["dim"], ENCODERS["bright"]
    s = dim("a" + bright("b") + "c")
    assert s == sgr(22, 2) + "a" + sgr(22, 1) + "b" + sgr(22, 2) + "c" + sgr(22)
    assert [(x.text, x.css) for x in resolve(s)] == [
        ("a", DIM_FALLBACK_CSS),
        ("b", "font-weight: bold;"),
        ("c", DIM_FALLBACK_CSS),
    ]


def test_get_encoder_unknown():
    assert get_encoder("cyan") is ENCODERS["cyan"]
    with pytest.raises(ValueError, match="Unknown color/style 'chartreuse'"):
        get_encoder("chartreuse")
    with pytest.raises(ValueError):
        encode("chartreuse", "x")


def test_encode():
    assert encode("green", "ok") == sgr(32) + "ok" + sgr(39)


def test_paint_applies_first_name_innermost():
    assert paint("hi", "red", "underline") == sgr(4, 31) + "hi" + sgr(39, 24)
    assert paint("hi") == "hi"
