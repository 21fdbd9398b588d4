"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose cancellation constructs via the canonical
``rivet_providers.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` is the out-of-band cancellation signal threaded
  through ``post_to_api`` and the stream decoder.
- ``AbortError`` is raised by operations that observe a cancellation request
  and is passed through every error boundary unchanged.
"""

from .cancellation_parts.abort_error import AbortError, is_abort_error
from .cancellation_parts.cancellation_token import CancellationToken, raise_if_cancelled

__all__ = ["AbortError", "CancellationToken", "is_abort_error", "raise_if_cancelled"]
