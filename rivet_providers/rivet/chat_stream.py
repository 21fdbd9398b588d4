"""Rivet chat request pipeline.

Ties the pieces together: neutral prompt -> wire messages -> JSON request
body -> ``post_json_to_api`` -> decoded response. Prompt conversion happens
before any network activity, so conversion errors never reach the wire.

Credentials and endpoint selection are the caller's concern: pass the full
URL and an ``Authorization`` header.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

import httpx

from ..base.cancellation import CancellationToken
from ..base.http import (
    HandlerResult,
    ResponseHandler,
    create_event_source_response_handler,
    create_json_response_handler,
    post_json_to_api,
)
from ..base.log_support import LogContext
from ..base.logging import log_event, resolve_logger
from ..base.models import ConversationTurn
from ..base.streaming import JsonEventStream
from .chat_prompt import RivetTool, RivetToolChoice, dump_wire, to_wire
from .convert_messages import convert_to_rivet_chat_messages

PROVIDER_NAME = "rivet.chat"


def build_rivet_request_body(
    prompt: Sequence[ConversationTurn],
    *,
    stream: bool,
    tools: Optional[Sequence[RivetTool]] = None,
    tool_choice: Optional[RivetToolChoice] = None,
    extras: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Assemble the JSON request body.

    Parameters:
        prompt: Neutral conversation to convert.
        stream: Whether server-sent streaming is requested.
        tools: Optional tool definitions.
        tool_choice: Optional tool choice; its fields are merged at top level.
        extras: Additional top-level fields (model settings etc.); they
            never override ``messages`` or ``stream``.

    Raises:
        UnsupportedFunctionalityError: see ``convert_to_rivet_chat_messages``.
    """
    body: Dict[str, Any] = dict(extras or {})
    if tools:
        body["tools"] = [dump_wire(t) for t in tools]
    if tool_choice is not None:
        body.update(dump_wire(tool_choice))
    body["messages"] = to_wire(convert_to_rivet_chat_messages(prompt))
    body["stream"] = stream
    return body


def stream_rivet_chat(
    url: str,
    *,
    prompt: Sequence[ConversationTurn],
    chunk_schema: Any,
    failed_response_handler: ResponseHandler[BaseException],
    headers: Optional[Mapping[str, Optional[str]]] = None,
    tools: Optional[Sequence[RivetTool]] = None,
    tool_choice: Optional[RivetToolChoice] = None,
    extras: Optional[Mapping[str, Any]] = None,
    cancellation: Optional[CancellationToken] = None,
    client: Optional[httpx.Client] = None,
    logger: Optional[logging.Logger] = None,
    model: Optional[str] = None,
) -> HandlerResult[JsonEventStream[Any]]:
    """Send a streaming chat request and return the decoded event stream.

    The returned stream yields one ``ParseResult`` per SSE record; close it
    (or use it as a context manager) to release the connection early.
    """
    body = build_rivet_request_body(prompt, stream=True, tools=tools, tool_choice=tool_choice, extras=extras)
    ctx = LogContext(provider=PROVIDER_NAME, model=model, url=url)
    log_event(resolve_logger(logger), "chat.stream.start", ctx, level=logging.DEBUG, messages=len(body["messages"]))
    return post_json_to_api(
        url,
        headers=headers,
        body=body,
        successful_response_handler=create_event_source_response_handler(
            chunk_schema, cancellation=cancellation, logger=logger, ctx=ctx
        ),
        failed_response_handler=failed_response_handler,
        cancellation=cancellation,
        client=client,
        logger=logger,
        ctx=ctx,
    )


def generate_rivet_chat(
    url: str,
    *,
    prompt: Sequence[ConversationTurn],
    response_schema: Any,
    failed_response_handler: ResponseHandler[BaseException],
    headers: Optional[Mapping[str, Optional[str]]] = None,
    tools: Optional[Sequence[RivetTool]] = None,
    tool_choice: Optional[RivetToolChoice] = None,
    extras: Optional[Mapping[str, Any]] = None,
    cancellation: Optional[CancellationToken] = None,
    client: Optional[httpx.Client] = None,
    logger: Optional[logging.Logger] = None,
    model: Optional[str] = None,
) -> HandlerResult[Any]:
    """Send a non-streaming chat request and return the validated body."""
    body = build_rivet_request_body(prompt, stream=False, tools=tools, tool_choice=tool_choice, extras=extras)
    ctx = LogContext(provider=PROVIDER_NAME, model=model, url=url)
    log_event(resolve_logger(logger), "chat.start", ctx, level=logging.DEBUG, messages=len(body["messages"]))
    return post_json_to_api(
        url,
        headers=headers,
        body=body,
        successful_response_handler=create_json_response_handler(response_schema),
        failed_response_handler=failed_response_handler,
        cancellation=cancellation,
        client=client,
        logger=logger,
        ctx=ctx,
    )


__all__ = ["PROVIDER_NAME", "build_rivet_request_body", "generate_rivet_chat", "stream_rivet_chat"]
