"""Structured logging context object.

This module defines :class:`LogContext`, a dataclass carrying the fields
shared by every event of one API call (provider, model, target URL, request
id, extra metadata). ``to_dict`` merges the ``extra`` mapping and prunes
``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for transport and stream decoding events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    url: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}

    def with_url(self, url: str) -> "LogContext":
        """Return a copy bound to ``url`` (existing URL wins)."""
        return LogContext(
            provider=self.provider,
            model=self.model,
            url=self.url or url,
            request_id=self.request_id,
            extra=dict(self.extra),
        )


__all__ = ["LogContext"]
