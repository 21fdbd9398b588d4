"""Response handler factories for ``post_to_api``.

Successful-response handlers:
    - ``create_event_source_response_handler``: decodes an SSE body into a
      lazy :class:`JsonEventStream` of parse results. The response stays open
      until the stream is closed or exhausted.
    - ``create_json_response_handler``: reads the whole body and validates it.

Failed-response handlers:
    - ``create_json_error_response_handler``: parses a vendor error payload
      with a caller-supplied schema and turns it into an ``APICallError``.
    - ``create_status_code_error_response_handler``: status and body only.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import httpx

from ..cancellation import CancellationToken
from ..errors import APICallError, EmptyResponseBodyError
from ..log_support import LogContext
from ..parsing import safe_parse_json
from ..streaming import JsonEventStream, parse_json_event_stream
from .handler_types import HandlerResult, ResponseContext, ResponseHandler
from .headers import extract_response_headers

_BODYLESS_STATUS_CODES = (204, 205, 304)


def _has_no_body(response: httpx.Response) -> bool:
    return response.status_code in _BODYLESS_STATUS_CODES or response.headers.get("content-length") == "0"


def _read_text(response: httpx.Response) -> str:
    try:
        response.read()
        return response.text
    finally:
        response.close()


def create_event_source_response_handler(
    chunk_schema: Any = None,
    *,
    cancellation: Optional[CancellationToken] = None,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> ResponseHandler[JsonEventStream[Any]]:
    """Return a handler decoding an SSE body against ``chunk_schema``.

    Raises ``EmptyResponseBodyError`` (wrapped by the transport) when the
    response has no body.
    """

    def handler(context: ResponseContext) -> HandlerResult[JsonEventStream[Any]]:
        response = context.response
        response_headers = extract_response_headers(response)
        if _has_no_body(response):
            response.close()
            raise EmptyResponseBodyError()
        results = parse_json_event_stream(
            response.iter_bytes(),
            chunk_schema,
            cancellation=cancellation,
            logger=logger,
            ctx=(ctx or LogContext()).with_url(context.url),
        )
        return HandlerResult(value=JsonEventStream(results, on_close=response.close), response_headers=response_headers)

    return handler


def create_json_response_handler(response_schema: Any = None) -> ResponseHandler[Any]:
    """Return a handler parsing the whole body as JSON."""

    def handler(context: ResponseContext) -> HandlerResult[Any]:
        response = context.response
        response_headers = extract_response_headers(response)
        text = _read_text(response)
        result = safe_parse_json(text, response_schema)
        if not result.success:
            raise APICallError(
                message="Invalid JSON response",
                cause=result.error,
                status_code=response.status_code,
                response_headers=response_headers,
                response_body=text,
                url=context.url,
                request_body_values=context.request_body_values,
            )
        return HandlerResult(value=result.value, response_headers=response_headers)

    return handler


def create_json_error_response_handler(
    error_schema: Any,
    error_to_message: Callable[[Any], str],
    is_retryable: Optional[Callable[[httpx.Response, Any], bool]] = None,
) -> ResponseHandler[APICallError]:
    """Return a failed-response handler for JSON error payloads.

    Parameters:
        error_schema: Schema of the vendor error payload.
        error_to_message: Extracts a human-readable message from the parsed
            payload.
        is_retryable: Optional override of the status-derived retry hint.

    When the body is empty or does not match ``error_schema`` the error falls
    back to the response's reason phrase and keeps the raw body.
    """

    def handler(context: ResponseContext) -> HandlerResult[APICallError]:
        response = context.response
        response_headers = extract_response_headers(response)
        text = _read_text(response)
        message = response.reason_phrase
        data = None
        if text.strip():
            parsed = safe_parse_json(text, error_schema)
            if parsed.success:
                data = parsed.value
                message = error_to_message(data)

        error = APICallError(
            message=message,
            url=context.url,
            request_body_values=context.request_body_values,
            status_code=response.status_code,
            response_headers=response_headers,
            response_body=text,
            is_retryable=is_retryable(response, data) if is_retryable else None,
            data=data,
        )
        return HandlerResult(value=error, response_headers=response_headers)

    return handler


def create_status_code_error_response_handler() -> ResponseHandler[APICallError]:
    """Return a failed-response handler using only status and raw body."""

    def handler(context: ResponseContext) -> HandlerResult[APICallError]:
        response = context.response
        response_headers = extract_response_headers(response)
        text = _read_text(response)
        return HandlerResult(
            value=APICallError(
                message=response.reason_phrase,
                url=context.url,
                request_body_values=context.request_body_values,
                status_code=response.status_code,
                response_headers=response_headers,
                response_body=text,
            ),
            response_headers=response_headers,
        )

    return handler


__all__ = [
    "create_event_source_response_handler",
    "create_json_error_response_handler",
    "create_json_response_handler",
    "create_status_code_error_response_handler",
]
