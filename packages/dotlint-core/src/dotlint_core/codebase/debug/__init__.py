import logging
import os
from functools import wraps

_LOGGER_NAME = "dotlint"
_logger = logging.getLogger(_LOGGER_NAME)
_SPY_LOGGER = logging.getLogger("dotlint.spy")


def configure_logger(level: int = logging.WARNING, handler: logging.Handler | None = None) -> logging.Logger:
    """
    Ensure the dotlint logger has exactly one handler and set its level.

    An explicit `handler` replaces whatever is installed; without one, an
    existing handler is kept and a stderr StreamHandler is added only if none exists.
    """
    if handler is not None:
        for old in list(_logger.handlers):
            _logger.removeHandler(old)
        _logger.addHandler(handler)
    elif not _logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s [%(name)s] %(message)s"))
        _logger.addHandler(handler)
    _logger.setLevel(logging.DEBUG if spy_enabled() else level)
    return _logger


def spy_enabled() -> bool:
    val = os.getenv("DOTLINT_SPY", "0")
    return str(val).lower() not in {"", "0", "false", "no"}


def spy_trace(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if spy_enabled():
            _SPY_LOGGER.debug("Entering %s", func.__qualname__)
        result = func(*args, **kwargs)
        if spy_enabled():
            _SPY_LOGGER.debug("Exiting %s", func.__qualname__)
        return result

    return wrapper
