"""
ANSI escape code → HTML converter.

Builds on ``Colors.styled_with_css`` so the browser sees exactly the CSS a
WebInspector console would get for the same string.
"""
import re
from typing import List, Union

from ansicolour._config import ESC, SGR_PATTERN
from ansicolour.core.colors import Colors

# Regex: matches ESC[<n>m  (the only family the transcoder understands)
_ANSI_RE = re.compile(SGR_PATTERN)


def _escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def to_html(source: Union[str, Colors]) -> str:
    """Convert the SGR codes in *source* to HTML ``<span>`` elements.

    *source* is either a raw escape-coded string or a parsed ``Colors``.
    Returns HTML safe for embedding inside a ``<pre>`` block.  Runs with no
    style at all are emitted as bare text.
    """
    colors = source if isinstance(source, Colors) else Colors(source)
    parts: List[str] = []
    for span in colors.styled_with_css:
        text = _escape_html(span.text)
        if span.css:
            parts.append(f'<span style="{_escape_html(span.css)}">{text}</span>')
        else:
            parts.append(text)
    return "".join(parts)


def strip_ansi(text: str) -> str:
    """Remove every ``ESC[<n>m`` sequence from *text*."""
    return _ANSI_RE.sub("", text)


def tail_lines(text: str, n: int = 1000) -> str:
    """Return the last *n* lines of *text* (all of them when *n* <= 0)."""
    lines = text.split("\n")
    if n <= 0 or len(lines) <= n:
        return text
    return "\n".join(lines[-n:])


# Typed forms of ESC accepted in editors: \e  \x1b  \033  \u001b
_ESCAPE_LITERAL_RE = re.compile(r"\\(?:e|x1b|033|u001b)")


def unescape_literals(text: str) -> str:
    """Replace typed ``\\e``-style escapes with a real ESC character."""
    return _ESCAPE_LITERAL_RE.sub(ESC, text)


def escape_literals(text: str) -> str:
    return text.replace(ESC, "\\e")
