"""
Workspace settings — loads / generates ``_ansicolour_.yaml``.

The file is created by ``ansicolour preview`` on first launch.  Users can
edit it to customise the preview server and library logging.
"""
import os
import yaml
from typing import Any, Dict

from ansicolour._config import SETTINGS_FILENAME, ROOT_DIR


_DEFAULTS: Dict[str, Any] = {
    # Preview server
    "ui_port": 8098,
    "ui_title": "ansicolour preview",
    "preview_max_lines": 1000,          # 0 = show everything
    # HTML output
    "html_background": "#1e1e1e",
    # Logging
    "log_enabled": False,               # enable/disable ansicolour internal logging
    "log_level": "INFO",                # DEBUG | INFO | WARNING | ERROR | CRITICAL
}

_TEMPLATE = """\
# ═══════════════════════════════════════════════════════════════
#  ansicolour Settings
#  Auto-generated on first launch — edit freely to customise.
#  Delete this file to reset all values to defaults.
# ═══════════════════════════════════════════════════════════════

# ── Preview server ──────────────────────────────────────────
ui_port: 8098                      # web preview port
ui_title: ansicolour preview       # browser tab title
preview_max_lines: 1000            # trailing lines shown (0 = all)

# ── HTML output ─────────────────────────────────────────────
html_background: "#1e1e1e"         # <pre> background colour

# ── Logging ─────────────────────────────────────────────────
log_enabled: false                 # true to enable ansicolour internal logs
log_level: INFO                    # DEBUG | INFO | WARNING | ERROR | CRITICAL
"""

# ── Module-level cache ───────────────────────────────────────
_cached: Dict[str, Any] = {}


def _settings_path(root_dir: str = ROOT_DIR) -> str:
    return os.path.join(root_dir, SETTINGS_FILENAME)


def ensure_settings_file(root_dir: str = ROOT_DIR) -> str:
    """Create ``_ansicolour_.yaml`` with defaults if it doesn't exist.

    Returns the file path.
    """
    path = _settings_path(root_dir)
    if not os.path.exists(path):
        os.makedirs(root_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(_TEMPLATE)
    return path


def load_settings(root_dir: str = ROOT_DIR) -> Dict[str, Any]:
    """Load settings from *root_dir*, falling back to defaults.

    Result is cached in-process; call ``reload_settings`` to refresh.
    """
    global _cached
    path = _settings_path(root_dir)
    merged = dict(_DEFAULTS)
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if isinstance(data, dict):
                merged.update(data)
        except (OSError, yaml.YAMLError):
            pass  # fall back to defaults silently
    _cached = merged
    return merged


def get(key: str, default: Any = None) -> Any:
    """Quick accessor for a single setting (uses cache).

    If the cache is empty, settings are loaded from ``ROOT_DIR`` first so
    that early callers (like ``log_utils``) still see user values.
    """
    if not _cached:
        load_settings(ROOT_DIR)
    return _cached.get(key, _DEFAULTS.get(key, default))


def reload_settings(root_dir: str = ROOT_DIR) -> Dict[str, Any]:
    """Force reload from disk."""
    return load_settings(root_dir)
