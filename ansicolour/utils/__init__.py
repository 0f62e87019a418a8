from .log_utils import get_logger  # noqa: F401
