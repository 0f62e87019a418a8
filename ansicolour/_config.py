"""
Internal configuration constants for ansicolour.

Environment variable names, settings file naming, SGR code numbers and the
color/style tables are defined here.  Changing a constant in this file
propagates everywhere automatically.
"""
import os
import re

# ═══════════════════════════════════════════════════════════════
#  Environment Variable Names
# ═══════════════════════════════════════════════════════════════
ENV_KEY_ROOT = "__ANSICOLOUR_ROOT__"       # directory holding the settings file

# ═══════════════════════════════════════════════════════════════
#  Directory / File Names
# ═══════════════════════════════════════════════════════════════
ROOT_DIR = os.getenv(ENV_KEY_ROOT, os.getcwd())
SETTINGS_FILENAME = "_ansicolour_.yaml"

# ═══════════════════════════════════════════════════════════════
#  SGR Codes  (ESC [ <n> m)
# ═══════════════════════════════════════════════════════════════
ESC = "\u001b"

# Widest parameter accepted as a code; longer digit runs stay literal text.
MAX_CODE_DIGITS = 8

# ESC[<n>m with an ASCII integer n.  Group 1 is the digits.
SGR_PATTERN = re.escape(ESC) + r"\[([0-9]{1,%d})m" % MAX_CODE_DIGITS

BRIGHT = 1
DIM = 2
INVERSE = 7
NO_BRIGHTNESS = 22
NO_ITALIC = 23
NO_UNDERLINE = 24
NO_INVERSE = 27
NO_COLOR = 39
NO_BG_COLOR = 49

BRIGHTNESS_CODES = (BRIGHT, DIM, NO_BRIGHTNESS)

FG_BASE = 30
BG_BASE = 40
BG_BRIGHT_BASE = 100
UNSTYLE_BASE = 20

# Indexed by ``code % 10``.  ``None`` marks a slot with no meaning.
COLOR_NAMES = (
    "black", "red", "green", "yellow", "blue",
    "magenta", "cyan", "white", None, "default",
)
STYLE_NAMES = (
    None, "bright", "dim", "italic", "underline",
    None, None, "inverse",
)

# ═══════════════════════════════════════════════════════════════
#  CSS Palettes  (rgb triples)
# ═══════════════════════════════════════════════════════════════
CSS_COLORS = {
    "black":   (0, 0, 0),
    "red":     (196, 26, 22),
    "green":   (0, 116, 0),
    "yellow":  (179, 167, 0),
    "blue":    (28, 0, 207),
    "magenta": (136, 18, 128),
    "cyan":    (7, 144, 154),
    "white":   (230, 230, 230),
}

BRIGHT_CSS_COLORS = {
    "black":   (32, 32, 32),
    "red":     (200, 0, 0),
    "green":   (0, 160, 0),
    "yellow":  (204, 190, 0),
    "blue":    (50, 0, 207),
    "magenta": (170, 13, 145),
    "cyan":    (9, 173, 185),
    "white":   (255, 255, 255),
}

# Rendered for a dimmed default color (no palette entry to dim).
DIM_FALLBACK_CSS = "color:rgba(0,0,0,0.5);text-shadow:rgba(255,255,255,0.5) 0 0;"

# Placeholder token understood by WebInspector-style console APIs.
CONSOLE_STYLE_PLACEHOLDER = "%c"
