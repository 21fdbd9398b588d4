"""Transport layer: one POST request per call.

``post_to_api`` is the single sender; ``post_json_to_api`` and
``post_form_data_to_api`` prepare its body. The contract:

- exactly one network call, method ``POST``, caller headers extended with
  the provider-utils and runtime user-agent segments;
- non-success status: the failed-response handler builds the error to raise;
  a handler crashing with anything but an abort or an ``APICallError`` is
  wrapped into one ``APICallError`` carrying the response status and headers;
- success: the successful-response handler's result is returned; its crashes
  are wrapped the same way;
- every exception leaving ``post_to_api`` passes through
  :func:`handle_fetch_error` exactly once.

Cancellation is cooperative: the token is checked before sending and again
as soon as the response headers arrive.

The response is always opened in streaming mode. Failed responses are closed
here; successful responses are handed to the handler, which owns closing
them (streaming handlers close when the consumer is done).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple, TypeVar

import httpx

from ..cancellation import CancellationToken, is_abort_error, raise_if_cancelled
from ..constants import JSON_CONTENT_TYPE, PROVIDER_UTILS_USER_AGENT, TRANSPORT_CLIENT_PURPOSE
from ..errors import APICallError, classify_exception, handle_fetch_error
from ..log_support import LogContext
from ..logging import log_event, normalized_log_event, resolve_logger
from .client import get_httpx_client
from .form_data import FormData, FormFields
from .handler_types import BodyContent, HandlerResult, RequestBody, ResponseContext, ResponseHandler
from .headers import extract_response_headers, get_runtime_user_agent, remove_undefined_entries, with_user_agent_suffix

T = TypeVar("T")

Headers = Optional[Mapping[str, Optional[str]]]


def _has_header(headers: Mapping[str, Any], name: str) -> bool:
    lowered = name.lower()
    return any(k.lower() == lowered for k in headers)


def _normalize_content(content: BodyContent) -> Tuple[str | bytes, Dict[str, str]]:
    """Return wire content and the headers implied by its shape."""
    if isinstance(content, str):
        return content, {}
    if isinstance(content, FormData):
        return content.encode(), {"Content-Type": content.content_type}
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content), {}
    raise TypeError("Unsupported body content type")


def _wrap_handler_error(
    error: Exception,
    message: str,
    response: httpx.Response,
    response_headers: Dict[str, str],
    url: str,
    request_body_values: Any,
) -> BaseException:
    if is_abort_error(error) or isinstance(error, APICallError):
        return error
    return APICallError(
        message=message,
        cause=error,
        status_code=response.status_code,
        url=url,
        response_headers=response_headers,
        request_body_values=request_body_values,
    )


def _handle_failed_response(
    response: httpx.Response,
    response_headers: Dict[str, str],
    url: str,
    body: RequestBody,
    failed_response_handler: ResponseHandler[BaseException],
) -> BaseException:
    try:
        error_information = failed_response_handler(
            ResponseContext(response=response, url=url, request_body_values=body.values)
        )
    except Exception as error:
        return _wrap_handler_error(
            error, "Failed to process error response", response, response_headers, url, body.values
        )
    finally:
        response.close()
    value = error_information.value
    if isinstance(value, BaseException):
        return value
    return APICallError(
        message="Failed to process error response",
        status_code=response.status_code,
        url=url,
        response_headers=response_headers,
        request_body_values=body.values,
        data=value,
    )


def post_to_api(
    url: str,
    *,
    body: RequestBody,
    successful_response_handler: ResponseHandler[T],
    failed_response_handler: ResponseHandler[BaseException],
    headers: Headers = None,
    cancellation: Optional[CancellationToken] = None,
    client: Optional[httpx.Client] = None,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> HandlerResult[T]:
    """Send one POST request and hand the response to the matching handler.

    Parameters:
        url: Absolute target URL.
        body: Wire content (``str``, :class:`FormData` or a byte buffer) plus
            the structured values used for error reporting.
        successful_response_handler: Called for 2xx responses.
        failed_response_handler: Called for any other status; returns the
            error to raise.
        headers: Caller headers; ``None`` values are dropped.
        cancellation: Optional cooperative cancellation token.
        client: Optional ``httpx.Client``; the shared pooled client is used
            when omitted.
        logger: Optional logger for debug events; silent by default.
        ctx: Optional log context.

    Returns:
        The successful-response handler's :class:`HandlerResult`.

    Raises:
        AbortError: the token was cancelled.
        APICallError: non-success status, handler failure, or connectivity
            failure (``is_retryable=True``).
        TypeError: unsupported body content.
    """
    log = resolve_logger(logger)
    log_ctx = (ctx or LogContext()).with_url(url)
    try:
        content, implied_headers = _normalize_content(body.content)
        caller_headers = remove_undefined_entries(headers)
        merged = {k: v for k, v in implied_headers.items() if not _has_header(caller_headers, k)}
        merged.update(caller_headers)
        request_headers = with_user_agent_suffix(merged, PROVIDER_UTILS_USER_AGENT, get_runtime_user_agent())

        raise_if_cancelled(cancellation)
        http = client if client is not None else get_httpx_client(None, TRANSPORT_CLIENT_PURPOSE)
        request = http.build_request("POST", url, headers=request_headers, content=content)
        log_event(log, "http.request", log_ctx, level=logging.DEBUG, method="POST", body=body.values)
        response = http.send(request, stream=True)
        log_event(log, "http.response", log_ctx, level=logging.DEBUG, status_code=response.status_code)

        try:
            raise_if_cancelled(cancellation)
        except BaseException:
            response.close()
            raise

        response_headers = extract_response_headers(response)

        if not response.is_success:
            raise _handle_failed_response(response, response_headers, url, body, failed_response_handler)

        try:
            return successful_response_handler(
                ResponseContext(response=response, url=url, request_body_values=body.values)
            )
        except Exception as error:
            response.close()
            wrapped = _wrap_handler_error(
                error, "Failed to process successful response", response, response_headers, url, body.values
            )
            if wrapped is error:
                raise
            raise wrapped from error
    except Exception as error:
        classified = handle_fetch_error(error, url, body.values)
        normalized_log_event(
            log,
            "http.error",
            log_ctx,
            phase="request",
            error_code=classify_exception(classified).value,
            level=logging.DEBUG if is_abort_error(classified) else logging.WARNING,
            error=str(classified),
        )
        if classified is error:
            raise
        raise classified from error


def post_json_to_api(
    url: str,
    *,
    body: Any,
    successful_response_handler: ResponseHandler[T],
    failed_response_handler: ResponseHandler[BaseException],
    headers: Headers = None,
    cancellation: Optional[CancellationToken] = None,
    client: Optional[httpx.Client] = None,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> HandlerResult[T]:
    """POST ``body`` serialized as JSON.

    The structured ``body`` is kept as the request values for error
    reporting. ``Content-Type: application/json`` is set unless the caller
    overrides it. NaN and infinity are rejected with ``ValueError`` before
    any network activity.
    """
    json_headers: Dict[str, Optional[str]] = {} if _has_header(headers or {}, "Content-Type") else {"Content-Type": JSON_CONTENT_TYPE}
    json_headers.update(headers or {})
    return post_to_api(
        url,
        headers=json_headers,
        body=RequestBody(content=json.dumps(body, ensure_ascii=False, allow_nan=False), values=body),
        successful_response_handler=successful_response_handler,
        failed_response_handler=failed_response_handler,
        cancellation=cancellation,
        client=client,
        logger=logger,
        ctx=ctx,
    )


def post_form_data_to_api(
    url: str,
    *,
    form_data: FormData | FormFields,
    successful_response_handler: ResponseHandler[T],
    failed_response_handler: ResponseHandler[BaseException],
    headers: Headers = None,
    cancellation: Optional[CancellationToken] = None,
    client: Optional[httpx.Client] = None,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> HandlerResult[T]:
    """POST a form-encoded body.

    The form carries its own content type; the flattened field mapping is
    kept as the request values for error reporting.
    """
    form = form_data if isinstance(form_data, FormData) else FormData(form_data)
    return post_to_api(
        url,
        headers=headers,
        body=RequestBody(content=form, values=form.to_dict()),
        successful_response_handler=successful_response_handler,
        failed_response_handler=failed_response_handler,
        cancellation=cancellation,
        client=client,
        logger=logger,
        ctx=ctx,
    )


__all__ = ["post_form_data_to_api", "post_json_to_api", "post_to_api"]
