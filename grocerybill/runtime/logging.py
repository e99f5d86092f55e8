"""Logging setup for the ``grocerybill`` logger namespace.

Every module asks for its logger through ``get_logger(__name__)``; the
first call attaches one stderr handler to the namespace root. The level
comes from GROCERYBILL_LOG_LEVEL, which takes a level name ("debug",
"WARNING") or a number ("10"); anything else falls back to INFO.
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_NAMESPACE = "grocerybill"
LOG_LEVEL_ENV_VAR = "GROCERYBILL_LOG_LEVEL"

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
# Debug output also names the source line.
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

_handler: logging.Handler | None = None


def level_from_env(raw: str | None = None) -> int:
    """Resolve a log level from GROCERYBILL_LOG_LEVEL (or ``raw`` if given)."""
    value = (os.environ.get(LOG_LEVEL_ENV_VAR, "") if raw is None else raw).strip()
    if value.isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value.upper(), DEFAULT_LOG_LEVEL)


def _formatter_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level <= logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None) -> None:
    """Attach the stderr handler to the namespace root, once per process."""
    global _handler

    if _handler is not None:
        return

    if level is None:
        level = level_from_env()

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_formatter_for(level))

    namespace_logger = logging.getLogger(LOG_NAMESPACE)
    namespace_logger.setLevel(level)
    namespace_logger.addHandler(_handler)
    namespace_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` inside the grocerybill namespace.

    Package modules keep their dotted ``__name__``; anything else is
    nested under the namespace.
    """
    configure_logging()

    if name == LOG_NAMESPACE or name.startswith(f"{LOG_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOG_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the namespace level at runtime, switching format with it."""
    configure_logging(level)
    logging.getLogger(LOG_NAMESPACE).setLevel(level)
    if _handler is not None:
        _handler.setFormatter(_formatter_for(level))
