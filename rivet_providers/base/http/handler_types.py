"""Types shared by the transport and its response handlers.

A response handler is a plain callable ``(ResponseContext) -> HandlerResult``.
Failed-response handlers return the error to raise as ``HandlerResult.value``;
successful-response handlers return the decoded value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar, Union

import httpx

from .form_data import FormData

T = TypeVar("T")

BodyContent = Union[str, FormData, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class RequestBody:
    """Wire content of a request plus the structured values it was built from.

    ``values`` is never sent; it is attached to errors for reporting.
    """

    content: BodyContent
    values: Any = None


@dataclass(frozen=True)
class ResponseContext:
    """What a response handler receives."""

    response: httpx.Response
    url: str
    request_body_values: Any = None


@dataclass(frozen=True)
class HandlerResult(Generic[T]):
    """What a response handler returns."""

    value: T
    response_headers: Optional[Dict[str, str]] = None


ResponseHandler = Callable[[ResponseContext], HandlerResult[T]]

__all__ = ["BodyContent", "HandlerResult", "RequestBody", "ResponseContext", "ResponseHandler"]
