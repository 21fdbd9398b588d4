"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class threaded through transport calls and
stream decoding to enable early termination via cooperative polling.
"""

from __future__ import annotations

from threading import Lock

from .abort_error import AbortError


class CancellationToken:
    """A cooperative cancellation token.

    Thread-safe for ``cancel`` + ``raise_if_cancelled`` usage, so a token may
    be cancelled from another thread while a stream is being consumed. The
    first ``cancel`` wins; later calls keep the original reason.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._reason: str | None = None
        self._lock = Lock()

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cooperative cancellation. Idempotent."""
        with self._lock:
            if self._cancelled:
                return
            self._reason = reason
            self._cancelled = True

    def raise_if_cancelled(self) -> None:
        """Raise ``AbortError`` if the token is cancelled."""
        if self._cancelled:
            raise AbortError(self._reason or "operation aborted")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._cancelled}, reason={self._reason!r})"


def raise_if_cancelled(token: "CancellationToken | None") -> None:
    """Check an optional token; no-op when ``token`` is ``None``."""
    if token is not None:
        token.raise_if_cancelled()


__all__ = ["CancellationToken", "raise_if_cancelled"]
