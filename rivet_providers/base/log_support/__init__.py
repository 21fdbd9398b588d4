"""Logging support types: the JSON line formatter and the per-call context."""

from .json_formatter import ISO, JsonFormatter
from .logging_context import LogContext

__all__ = ["ISO", "JsonFormatter", "LogContext"]
