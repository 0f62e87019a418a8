"""
CLI entry point — ``ansicolour <command> [args]`` or ``ansicolour help``.
"""

import json
import sys
import textwrap
from typing import List, Optional

from . import __version__ as _VERSION
from .core.colors import Colors
from .core.encoder import ENCODERS, paint
from .utils import get_logger
from .utils.ansi_utils import to_html, strip_ansi

logger = get_logger(__name__)

# ─── Help text ────────────────────────────────────────────────

_HELP = textwrap.dedent(
    f"""
ansicolour v{_VERSION}

USAGE
    ansicolour html [FILE]           Render escape-coded text as HTML spans
    ansicolour console [FILE]        Print browser console.log arguments (JSON)
    ansicolour spans [FILE]          Print resolved {{text, css}} spans (JSON)
    ansicolour strip [FILE]          Remove all SGR codes
    ansicolour paint NAMES TEXT      Wrap TEXT in comma-separated colors/styles
    ansicolour styles                List every color/style name
    ansicolour preview [FILE]        Open the live preview in a browser
    ansicolour help | version        Show help / version

    FILE defaults to stdin.

EXAMPLES
    $ ls --color=always | ansicolour html > listing.html
    $ ansicolour paint red,underline "warning"
    """.strip()
)


def _print_help():
    print(_HELP)
    sys.exit(0)


def _print_version():
    print(f"ansicolour {_VERSION}")
    sys.exit(0)


def _fail(message: str):
    print(f"\033[91mError: {message}\033[0m", file=sys.stderr)
    sys.exit(1)


def _read_source(args: List[str]) -> str:
    if args:
        with open(args[0], "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


# ─── Commands ─────────────────────────────────────────────────


def _cmd_html(args: List[str]) -> None:
    print(to_html(_read_source(args)))


def _cmd_console(args: List[str]) -> None:
    print(json.dumps(Colors(_read_source(args)).browser_console_arguments, ensure_ascii=False))


def _cmd_spans(args: List[str]) -> None:
    spans = Colors.resolve(_read_source(args))
    payload = [{"text": s.text, "css": s.css} for s in spans]
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _cmd_strip(args: List[str]) -> None:
    sys.stdout.write(strip_ansi(_read_source(args)))


def _cmd_paint(args: List[str]) -> None:
    if len(args) < 2:
        _fail("Usage: ansicolour paint NAMES TEXT")
    names = [n.strip() for n in args[0].split(",") if n.strip()]
    print(paint(" ".join(args[1:]), *names))


def _cmd_styles(args: List[str]) -> None:
    for name, encoder in ENCODERS.items():
        print(encoder(name))


def _cmd_preview(args: List[str]) -> None:
    source_path = args[0] if args else ""
    source = _read_source(args)
    # Imported lazily so the other commands never pay for the web stack
    from ansicolour.ui.app import main as run_preview

    run_preview(source, source_path)


_COMMANDS = {
    "html": _cmd_html,
    "console": _cmd_console,
    "spans": _cmd_spans,
    "strip": _cmd_strip,
    "paint": _cmd_paint,
    "styles": _cmd_styles,
    "preview": _cmd_preview,
}


# ─── Main entry ───────────────────────────────────────────────


def main(argv: Optional[List[str]] = None):
    """``ansicolour <command>`` — dispatch to a sub-command."""
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        _print_help()

    cmd, args = argv[0], argv[1:]

    if cmd in ("help", "-h", "--help"):
        _print_help()
    if cmd in ("version", "-v", "--version"):
        _print_version()

    handler = _COMMANDS.get(cmd)
    if handler is None:
        _fail(f"unknown command '{cmd}'. Run `ansicolour help`.")

    logger.debug("Running command %s %s", cmd, args)
    try:
        handler(args)
    except (OSError, ValueError) as exc:
        _fail(str(exc))


if __name__ == "__main__":
    main()
