import logging
import sys
import threading

LIBRARY_ROOT = __name__.split(".")[0]

_CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d %(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s %(name)s:%(funcName)s:%(lineno)d] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_LOGGER_LOCK = threading.RLock()
_configured = False


def _root_logger() -> logging.Logger:
    """The ``ansicolour`` logger, configured from settings on first use."""
    global _configured
    root = logging.getLogger(LIBRARY_ROOT)

    with _LOGGER_LOCK:
        if _configured:
            return root
        _configured = True
        root.propagate = False

        from ansicolour.utils.settings import get as _get_setting
        if not _get_setting("log_enabled", False):
            # log calls short-circuit after an int compare
            root.setLevel(logging.CRITICAL + 1)
            return root

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATEFMT))
        try:
            console_handler.setLevel(str(_get_setting("log_level", "INFO")).upper())
        except ValueError:
            console_handler.setLevel(logging.INFO)
        root.addHandler(console_handler)
        root.setLevel(logging.DEBUG)
    return root


def attach_file_handler(log_path: str) -> logging.Handler:
    """Also write library logs at DEBUG and above to *log_path* (appending)."""
    root = _root_logger()
    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATEFMT))
    file_handler.setLevel(logging.DEBUG)
    root.addHandler(file_handler)
    root.setLevel(logging.DEBUG)
    return file_handler


def get_logger(name: str = None) -> logging.Logger:
    if name == "__main__":
        name = LIBRARY_ROOT + ".__main__"
    _root_logger()
    return logging.getLogger(name)
