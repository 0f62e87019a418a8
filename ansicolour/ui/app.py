"""
Preview entry point — renders escape-coded text in the browser with NiceGUI.

Escape sequences can be typed as ``\\e[31m`` / ``\\x1b[31m`` / ``\\033[31m``
in the editor; they are turned into real ESC characters before rendering.
"""
import os
from dataclasses import asdict

from nicegui import ui

from ansicolour.ui.state import PreviewState
from ansicolour.ui.theme import (
    HEADER_CLASSES, HEADER_TITLE_CLASSES, HEADER_PATH_CLASSES,
    BODY_CLASSES, EDITOR_COL_CLASSES, PREVIEW_COL_CLASSES,
    SECTION_LABEL_CLASSES, EDITOR_PROPS, PREVIEW_CARD_CLASSES,
)
from ansicolour.utils import get_logger
from ansicolour.utils.ansi_utils import escape_literals, unescape_literals

logger = get_logger(__name__)

_settings: dict = {}
_source_path: str = ""
_source_text: str = ""


@ui.page("/")
def main_page():
    """Per-session page — the editor on the left, the rendering on the right."""
    state = PreviewState(_settings=_settings, source=_source_text, source_path=_source_path)
    logger.debug("New preview session  %s", asdict(state))

    with ui.row().classes(HEADER_CLASSES):
        ui.label(_settings.get("ui_title", "ansicolour preview")).classes(HEADER_TITLE_CLASSES)
        ui.label(state.source_path or "<stdin>").classes(HEADER_PATH_CLASSES)

    with ui.row().classes(BODY_CLASSES):
        with ui.column().classes(EDITOR_COL_CLASSES):
            ui.label("Source").classes(SECTION_LABEL_CLASSES)
            editor = ui.textarea(value=escape_literals(state.source)).props(EDITOR_PROPS).classes("w-full")

        with ui.column().classes(PREVIEW_COL_CLASSES):
            ui.label("Rendered").classes(SECTION_LABEL_CLASSES)
            with ui.card().classes(PREVIEW_CARD_CLASSES):
                preview = ui.html(state.render_html()).classes("w-full")

    def _on_change(e):
        state.source = unescape_literals(e.value or "")
        preview.content = state.render_html()

    editor.on_value_change(_on_change)


def main(source_text: str = "", source_path: str = "", *, reload: bool = False):
    """Load settings and start the preview server on ``ui_port``."""
    global _settings, _source_path, _source_text

    import ansicolour._config as _cfg
    from ansicolour.utils.settings import load_settings, ensure_settings_file

    root = os.getenv(_cfg.ENV_KEY_ROOT, _cfg.ROOT_DIR)
    ensure_settings_file(root)
    _settings = load_settings(root)
    _source_text = source_text
    _source_path = source_path

    port = int(_settings.get("ui_port", 8098))
    logger.info("Preview starting  root=%s  port=%s", root, port)
    ui.run(
        title=_settings.get("ui_title", "ansicolour preview"),
        port=port,
        show=True,
        reload=reload,
        favicon="🎨",
    )


if __name__ in {"__main__", "__mp_main__"}:
    main(reload=True)
