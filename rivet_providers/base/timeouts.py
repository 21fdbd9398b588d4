"""Centralized timeout configuration for the transport layer.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values (seconds).

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and again only when the relevant variables change. Supported
    environment variables (all optional):
        PT_TIMEOUT_CONNECT_SECONDS
        PT_TIMEOUT_HTTP_SECONDS
        PT_TIMEOUT_STREAM_SECONDS

Design Constraints
------------------
1. No hard-coded ad-hoc timeouts outside this module.
2. Avoid per-call env parsing (cache after first read).
3. Invalid or non-positive values fall back to defaults silently.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx

_ENV_NAMES = (
    "PT_TIMEOUT_CONNECT_SECONDS",
    "PT_TIMEOUT_HTTP_SECONDS",
    "PT_TIMEOUT_STREAM_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Time allowed to establish a connection.
        http_timeout_seconds: Write and pool acquisition timeout.
        stream_timeout_seconds: Idle timeout while waiting for the next bytes
            of a response, which for streamed responses is the gap between
            two SSE chunks.
    """

    connect_timeout_seconds: float = 10.0
    http_timeout_seconds: float = 30.0
    stream_timeout_seconds: float = 60.0

    def to_httpx(self) -> httpx.Timeout:
        """Build the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(
            self.http_timeout_seconds,
            connect=self.connect_timeout_seconds,
            read=self.stream_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, else return ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and guard == _ENV_GUARD:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", defaults.connect_timeout_seconds),
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", defaults.http_timeout_seconds),
        stream_timeout_seconds=_parse_env_float("PT_TIMEOUT_STREAM_SECONDS", defaults.stream_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
