"""
Tests for ansicolour.core.color — palette lookup, brightness and inverse.
"""
from ansicolour._config import BRIGHT, DIM, DIM_FALLBACK_CSS
from ansicolour.core.color import Color


def test_foreground_css():
    assert Color(False, "red").to_css() == "color:rgba(196,26,22,1);"


def test_background_css():
    assert Color(True, "blue").to_css() == "background:rgba(28,0,207,1);"


def test_fallback_brightness_selects_palette():
    red = Color(False, "red")
    assert red.to_css(False, BRIGHT) == "color:rgba(200,0,0,1);"
    assert red.to_css(False, DIM) == "color:rgba(196,26,22,0.5);"


def test_own_brightness_wins_over_fallback():
    cyan = Color(True, "cyan", BRIGHT)
    assert cyan.to_css() == "background:rgba(9,173,185,1);"
    assert cyan.to_css(False, DIM) == "background:rgba(9,173,185,1);"


def test_default_color():
    assert Color().to_css() == ""
    assert Color(False, "default").to_css() == ""
    assert Color().to_css(False, BRIGHT) == ""
    assert Color().to_css(False, DIM) == DIM_FALLBACK_CSS


def test_unknown_name_degrades_to_empty():
    assert Color(False, "chartreuse").to_css() == ""
    assert Color(True, "chartreuse").to_css() == ""


def test_inverse_swaps_role():
    assert Color(False, "red").inverse == Color(True, "red")
    assert Color(True, "green", BRIGHT).inverse == Color(False, "green", BRIGHT)


def test_inverse_names_default_colors():
    assert Color().inverse == Color(True, "black")
    assert Color(True).inverse == Color(False, "white")


def test_inverse_involution():
    c = Color(False, "magenta", DIM)
    assert c.inverse.inverse == c

    # A default color gets a name on the first inversion which then sticks
    once = Color().inverse
    assert once.inverse.inverse == once
    assert once.inverse == Color(False, "black")


def test_inverted_css():
    assert Color(False, "red").to_css(True) == "background:rgba(196,26,22,1);"
    assert Color().to_css(True) == "background:rgba(0,0,0,1);"
    assert Color(True).to_css(True) == "color:rgba(230,230,230,1);"
