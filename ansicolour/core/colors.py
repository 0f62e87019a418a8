"""
Styled text engine.

``Colors`` holds a parsed escape-coded string as an ordered list of spans,
each span being a run of text and the SGR code that *follows* it.
``styled_with_css`` replays those spans through a small style state machine
(foreground, background, brightness, active styles) and returns a new
``Colors`` whose spans also carry the resolved CSS.
"""
import re
from typing import Iterable, Iterator, List, NamedTuple, Optional, Set

from ansicolour._config import SGR_PATTERN, CONSOLE_STYLE_PLACEHOLDER, BRIGHT
from ansicolour.core.code import Code, CodeType
from ansicolour.core.color import Color

# Regex: matches ESC[<n>m  (single-parameter SGR only)
_SGR_RE = re.compile(SGR_PATTERN)


class Span(NamedTuple):
    text: str
    code: Code


class StyledSpan(NamedTuple):
    text: str
    code: Code
    css: str


def _scan(s: str) -> Iterator[Span]:
    """Single forward pass: yield each text run paired with the code after it."""
    if not s:
        return
    last = 0
    for m in _SGR_RE.finditer(s):
        yield Span(s[last:m.start()], Code.from_wire(m.group(1)))
        last = m.end()
    # Trailing text has no code after it
    yield Span(s[last:], Code())


def _as_span(item) -> Span:
    if isinstance(item, (Span, StyledSpan)):
        return item
    text, code = item
    return Span(text, code if isinstance(code, Code) else Code(code))


class Colors:
    """An immutable sequence of spans parsed from an escape-coded string."""

    def __init__(self, s: str = ""):
        self._spans = tuple(_scan(s))
        self._styled = False

    @classmethod
    def from_spans(cls, spans: Iterable) -> "Colors":
        colors = cls()
        colors._spans = tuple(_as_span(s) for s in spans)
        colors._styled = all(isinstance(s, StyledSpan) for s in colors._spans)
        return colors

    @classmethod
    def parse(cls, s: str) -> "Colors":
        return cls(s)

    @classmethod
    def resolve(cls, s: str) -> "Colors":
        """Parse *s* and resolve it to CSS-styled spans in one step."""
        return cls(s).styled_with_css

    @property
    def spans(self) -> List:
        return list(self._spans)

    @property
    def styled_with_css(self) -> "Colors":
        if self._styled and self._spans:
            return self

        color = Color()
        bg_color = Color(background=True)
        brightness: Optional[int] = None
        styles: Set[str] = set()

        styled: List[StyledSpan] = []
        for span in self._spans:
            code = span.code

            # The trailing code only applies from the next span on
            inverted = "inverse" in styles
            bold = "font-weight: bold;" if brightness == BRIGHT else ""
            italic = "font-style: italic;" if "italic" in styles else ""
            underline = "text-decoration: underline;" if "underline" in styles else ""

            css = (bold + italic + underline
                   + color.to_css(inverted, brightness)
                   + bg_color.to_css(inverted))
            styled.append(StyledSpan(span.text, code, css))

            if code.is_brightness:
                brightness = code.value
                continue

            kind, subtype = code.type, code.subtype
            if kind is CodeType.COLOR:
                color = Color(False, subtype)
            elif kind is CodeType.BG_COLOR:
                bg_color = Color(True, subtype)
            elif kind is CodeType.BG_COLOR_BRIGHT:
                bg_color = Color(True, subtype, BRIGHT)
            elif kind is CodeType.STYLE and subtype:
                styles.add(subtype)
            elif kind is CodeType.UNSTYLE and subtype:
                styles.discard(subtype)

        return Colors.from_spans(s for s in styled if s.text)

    @property
    def browser_console_arguments(self) -> List[str]:
        """``[format, css, css, ...]`` for ``console.log``-style APIs.

        Each span contributes a ``%c`` placeholder followed by its text to
        the format string, and its CSS as the matching trailing argument.
        """
        spans = self.styled_with_css.spans
        fmt = "".join(CONSOLE_STYLE_PLACEHOLDER + s.text for s in spans)
        return [fmt] + [s.css for s in spans]

    @property
    def text(self) -> str:
        """The plain text with every code removed."""
        return "".join(s.text for s in self._spans)

    def __str__(self):
        return "".join(s.text + str(s.code) for s in self._spans)

    def __iter__(self):
        return iter(self._spans)

    def __len__(self):
        return len(self._spans)

    def __eq__(self, other):
        if isinstance(other, Colors):
            return self._spans == other._spans
        return NotImplemented

    def __repr__(self):
        return f"Colors({str(self)!r})"


def parse(s: str) -> Colors:
    return Colors.parse(s)


def resolve(s: str) -> Colors:
    return Colors.resolve(s)
