"""rivet_providers package

Client-side adapter for the Rivet chat-completion API.

Purpose:
    Convert a neutral, multi-turn conversation into Rivet wire messages, send
    it with a single POST, and decode the (possibly streamed) response into
    typed parse results with one uniform error taxonomy.

Public API (re-exported):
    - Version: ``__version__``
    - Errors: :class:`APICallError`, :class:`UnsupportedFunctionalityError`,
      :class:`AbortError`
    - Conversion: :func:`convert_to_rivet_chat_messages`
    - Pipeline: :func:`stream_rivet_chat`, :func:`generate_rivet_chat`
"""

from .base.constants import VERSION
from .base.errors import AbortError, APICallError, UnsupportedFunctionalityError
from .rivet import convert_to_rivet_chat_messages, generate_rivet_chat, stream_rivet_chat

__version__ = VERSION

__all__ = [
    "__version__",
    "AbortError",
    "APICallError",
    "UnsupportedFunctionalityError",
    "convert_to_rivet_chat_messages",
    "generate_rivet_chat",
    "stream_rivet_chat",
]
