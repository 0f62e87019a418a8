"""
Per-session preview state — initialised from workspace settings.
"""
from dataclasses import dataclass, field
from typing import Dict, Any

from ansicolour.utils.ansi_utils import to_html, tail_lines

PRE_STYLE = "margin:0;padding:8px 12px;font-family:monospace;font-size:13px;white-space:pre-wrap;"


@dataclass
class PreviewState:
    """Mutable per-session state of the preview page.

    *_settings* is an optional dict from ``_ansicolour_.yaml`` that
    overrides the hard-coded defaults below.
    """
    _settings: Dict[str, Any] = field(default_factory=dict, repr=False)

    source: str = ""
    source_path: str = ""
    max_lines: int = 1000
    background: str = "#1e1e1e"

    def __post_init__(self):
        s = self._settings
        if not s:
            return
        self.max_lines = int(s.get("preview_max_lines", self.max_lines))
        self.background = str(s.get("html_background", self.background))

    def render_html(self) -> str:
        """The current source as a ready-to-embed ``<pre>`` block."""
        body = to_html(tail_lines(self.source, self.max_lines))
        return f'<pre style="background:{self.background};{PRE_STYLE}">{body}</pre>'

