"""
SGR code model — one numeric ``ESC [ <n> m`` parameter and its meaning.

The meaning is looked up by decile (``n // 10``) and then by ``n % 10``
against the color or style name table.  Values outside the tables give
``None`` for both ``type`` and ``subtype`` and never raise.
"""
from enum import Enum
from typing import Optional, Union

from ansicolour._config import (
    ESC, MAX_CODE_DIGITS, BRIGHTNESS_CODES, COLOR_NAMES, STYLE_NAMES,
)
from ansicolour.utils import get_logger

logger = get_logger(__name__)


class CodeType(str, Enum):
    STYLE = "style"
    UNSTYLE = "unstyle"
    COLOR = "color"
    BG_COLOR = "bgColor"
    BG_COLOR_BRIGHT = "bgColorBright"


# decile → type
_TYPES = {
    0: CodeType.STYLE,
    2: CodeType.UNSTYLE,
    3: CodeType.COLOR,
    4: CodeType.BG_COLOR,
    10: CodeType.BG_COLOR_BRIGHT,
}

_SUBTYPES = {
    CodeType.COLOR: COLOR_NAMES,
    CodeType.BG_COLOR: COLOR_NAMES,
    CodeType.BG_COLOR_BRIGHT: COLOR_NAMES,
    CodeType.STYLE: STYLE_NAMES,
    CodeType.UNSTYLE: STYLE_NAMES,
}


class Code:
    """A single SGR code.  ``Code()`` is the absent code and renders nothing."""

    __slots__ = ("value",)

    def __init__(self, value: Optional[Union[int, str]] = None):
        self.value: Optional[int] = None if value is None else int(value)

    @classmethod
    def from_wire(cls, digits: str) -> "Code":
        """Checked conversion from the digits captured inside ``ESC [ ... m``.

        Anything that is not a short ASCII integer gives the absent code.
        """
        if not (digits.isascii() and digits.isdigit()) or len(digits) > MAX_CODE_DIGITS:
            logger.debug("Rejected SGR parameter %.16r", digits)
            return cls()
        code = cls(int(digits))
        if code.type is None:
            logger.debug("Unmapped SGR code %s", code.value)
        return code

    @property
    def type(self) -> Optional[CodeType]:
        if self.value is None:
            return None
        return _TYPES.get(self.value // 10)

    @property
    def subtype(self) -> Optional[str]:
        table = _SUBTYPES.get(self.type)
        if table is None:
            return None
        index = self.value % 10
        return table[index] if index < len(table) else None

    @property
    def is_brightness(self) -> bool:
        return self.value in BRIGHTNESS_CODES

    def __str__(self):
        # A zero code is a real code but renders nothing
        return f"{ESC}[{self.value}m" if self.value else ""

    @staticmethod
    def to_str(value: Optional[int]) -> str:
        return str(Code(value))

    def __eq__(self, other):
        if isinstance(other, Code):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __bool__(self):
        return self.value is not None

    def __repr__(self):
        return f"Code({self.value!r})"
