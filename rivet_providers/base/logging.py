"""Base structured logging utilities for the provider layer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Transport and stream decoding never reach for a module-level logger; they
  receive a ``logging.Logger`` collaborator explicitly and fall back to
  :func:`null_logger`, which discards everything.
- ``debug_logger_from_env`` is the opt-in bridge for callers that want the
  ``RIVET_AI_PROVIDER_DEBUG=true`` switch; it is read when called, never at
  import time.

Event payloads are emitted as a single JSON object per line via
``log_event``; ``normalized_log_event`` adds the canonical keys ``phase``,
``emitted`` and ``error_code`` used by finalize events.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

_BASE_LOGGER_ATTR = "_providers_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_providers_console_handler"
_FILE_HANDLER_ATTR = "_providers_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

DEBUG_ENV_VAR = "RIVET_AI_PROVIDER_DEBUG"
LOG_LEVEL_ENV_VAR = "PROVIDERS_LOG_LEVEL"

_NULL_LOGGER = logging.Logger("providers.null")
_NULL_LOGGER.addHandler(logging.NullHandler())
_NULL_LOGGER.propagate = False
_NULL_LOGGER.disabled = True


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``providers`` logger."""
    logger = logging.getLogger("providers")
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV_VAR), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        for existing in logger.handlers:
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            existing.setLevel(desired_level)
            # Test harnesses swap sys.stderr between runs; follow the current one.
            # The previous stream may already be closed, so it is not flushed.
            if isinstance(existing, logging.StreamHandler) and existing.stream is not sys.stderr:
                existing.acquire()
                try:
                    existing.stream = sys.stderr
                finally:
                    existing.release()
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = "providers", json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger under the shared ``providers`` hierarchy.

    Child loggers (``providers.rivet`` etc.) carry no handlers of their own
    and propagate to the base logger's console handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == "providers":
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def null_logger() -> logging.Logger:
    """Return the silent logger used when no logger is injected."""
    return _NULL_LOGGER


def resolve_logger(logger: Optional[logging.Logger]) -> logging.Logger:
    """Return ``logger`` or the silent default."""
    return logger if logger is not None else _NULL_LOGGER


def debug_logger_from_env(name: str = "providers.rivet") -> logging.Logger:
    """Return a debug-level provider logger when the debug switch is on.

    The switch is ``RIVET_AI_PROVIDER_DEBUG=true`` (case-insensitive). When it
    is off the silent :func:`null_logger` is returned.
    """
    if os.getenv(DEBUG_ENV_VAR, "").strip().lower() != "true":
        return _NULL_LOGGER
    return get_logger(name, level=logging.DEBUG)


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
    logger_name: str = "providers",
) -> logging.Logger:
    """Reconfigure the shared providers logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (or reused). When ``None``, any previously attached file
        handler managed by this module is removed.
    json_mode: bool
        Whether to use the JSON formatter or a plain text formatter for the
        file handler.
    logger_name: str
        Name of the logger to configure. Defaults to the shared "providers" logger.

    Returns
    -------
    logging.Logger
        The configured logger instance. Handlers not managed by this module
        are left untouched.
    """
    logger = get_logger(logger_name, json_mode=json_mode)

    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for h in managed:
        if abs_path is not None and getattr(h, "baseFilename", None) == abs_path:
            h.setFormatter(_make_formatter(json_mode))
            h.setLevel(logger.level)
            continue
        logger.removeHandler(h)
        h.close()
    if abs_path is None or any(getattr(h, "baseFilename", None) == abs_path for h in logger.handlers):
        return logger

    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    # Bounded growth: 10MB x 5 backups
    fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setLevel(logger.level)
    fh.setFormatter(_make_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as one JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Destination logger (usually injected; may be the null logger).
    event: str
        Event name (e.g. ``http.request``).
    ctx: LogContext | None
        Request context merged shallowly into the payload.
    level: int
        Logging level of the emitted record.
    keep_none: bool
        When ``True``, keys whose values are ``None`` are preserved (encoded as
        JSON ``null``); otherwise they are dropped.
    **fields: Any
        Additional key/value pairs. Non-serializable values are rendered with
        ``repr``.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=repr))


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    emitted: int | bool | None = None,
    error_code: str | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit an event guaranteed to carry the ``phase`` and ``emitted`` keys.

    ``error_code`` is omitted when ``None`` to reflect "no error" naturally.
    Extra fields never clobber the normalized keys.
    """
    base_fields: dict[str, Any] = {"phase": phase, "emitted": emitted}
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is not None and k not in base_fields:
            base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "DEBUG_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "LogContext",
    "configure_logger",
    "debug_logger_from_env",
    "get_logger",
    "log_event",
    "normalized_log_event",
    "null_logger",
    "resolve_logger",
]
