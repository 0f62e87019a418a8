"""
Tests for ansicolour.core.brightness — reset injection and removal.
"""
import pytest

from ansicolour.core.brightness import normalize, denormalize

ESC = "\u001b"
BRIGHT = f"{ESC}[1m"
DIM = f"{ESC}[2m"
RESET = f"{ESC}[22m"


def test_denormalize_inserts_reset_before_each_brightness_code():
    s = BRIGHT + "foo" + DIM + "bar"
    assert denormalize(s) == RESET + BRIGHT + "foo" + RESET + DIM + "bar"


def test_normalize_removes_injected_resets():
    s = RESET + BRIGHT + "foo" + RESET + DIM + "bar"
    assert normalize(s) == BRIGHT + "foo" + DIM + "bar"


def test_other_codes_untouched():
    s = f"{ESC}[12m{ESC}[21m{ESC}[31mx{ESC}[39m"
    assert denormalize(s) == s
    assert normalize(s) == s


def test_lone_reset_kept():
    s = "a" + RESET + "b"
    assert normalize(s) == s
    assert denormalize(s) == s


@pytest.mark.parametrize("s", [
    "",
    "plain",
    BRIGHT + "x",
    BRIGHT + DIM + "x" + RESET,
    f"{ESC}[31m" + DIM + "a" + RESET + f"{ESC}[39m",
])
def test_round_trip(s):
    assert normalize(denormalize(s)) == s
