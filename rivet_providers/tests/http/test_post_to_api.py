"""Transport tests: one POST per call, error mapping and cancellation."""

from __future__ import annotations

import json

import httpx
import pytest

from rivet_providers.base.cancellation import AbortError, CancellationToken
from rivet_providers.base.constants import PROVIDER_UTILS_USER_AGENT
from rivet_providers.base.errors import APICallError
from rivet_providers.base.http import (
    FormData,
    HandlerResult,
    RequestBody,
    create_json_response_handler,
    create_status_code_error_response_handler,
    get_runtime_user_agent,
    post_form_data_to_api,
    post_json_to_api,
    post_to_api,
)

URL = "https://api.example.test/v1/chat"


def _ok_json(payload):
    return httpx.Response(200, json=payload, headers={"X-Request-Id": "req-1"})


def test_post_json_sends_one_post_with_headers(make_client):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return _ok_json({"ok": True})

    result = post_json_to_api(
        URL,
        body={"messages": [], "text": "héllo"},
        headers={"Authorization": "Bearer k", "X-Skip": None},
        successful_response_handler=create_json_response_handler(),
        failed_response_handler=create_status_code_error_response_handler(),
        client=make_client(handler),
    )

    assert result.value == {"ok": True}  # nosec B101 - pytest assert
    assert result.response_headers["x-request-id"] == "req-1"  # nosec B101 - pytest assert
    assert len(seen) == 1  # nosec B101 - pytest assert
    request = seen[0]
    assert request.method == "POST"  # nosec B101 - pytest assert
    assert request.headers["authorization"] == "Bearer k"  # nosec B101 - pytest assert
    assert "x-skip" not in request.headers  # nosec B101 - pytest assert
    assert request.headers["content-type"] == "application/json"  # nosec B101 - pytest assert
    assert json.loads(request.content.decode("utf-8")) == {"messages": [], "text": "héllo"}  # nosec B101
    user_agent = request.headers["user-agent"]
    assert PROVIDER_UTILS_USER_AGENT in user_agent  # nosec B101 - pytest assert
    assert user_agent.endswith(get_runtime_user_agent())  # nosec B101 - pytest assert


def test_caller_user_agent_is_kept_as_prefix(make_client):
    seen = []

    def handler(request):
        seen.append(request)
        return _ok_json({})

    post_json_to_api(
        URL,
        body={},
        headers={"user-agent": "my-app/2"},
        successful_response_handler=create_json_response_handler(),
        failed_response_handler=create_status_code_error_response_handler(),
        client=make_client(handler),
    )
    assert seen[0].headers["user-agent"].startswith("my-app/2 ai-sdk/provider-utils/")  # nosec B101


def test_caller_content_type_is_not_duplicated(make_client):
    seen = []

    def handler(request):
        seen.append(request)
        return _ok_json({})

    post_json_to_api(
        URL,
        body={},
        headers={"content-type": "application/vnd.rivet+json"},
        successful_response_handler=create_json_response_handler(),
        failed_response_handler=create_status_code_error_response_handler(),
        client=make_client(handler),
    )
    assert seen[0].headers.get_list("content-type") == ["application/vnd.rivet+json"]  # nosec B101


def test_failed_status_raises_handler_error(make_client):
    client = make_client(lambda request: httpx.Response(429, text="slow down"))
    with pytest.raises(APICallError) as excinfo:
        post_json_to_api(
            URL,
            body={"a": 1},
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=create_status_code_error_response_handler(),
            client=client,
        )
    error = excinfo.value
    assert error.status_code == 429  # nosec B101 - pytest assert
    assert error.is_retryable  # nosec B101 - pytest assert
    assert error.response_body == "slow down"  # nosec B101 - pytest assert
    assert error.request_body_values == {"a": 1}  # nosec B101 - pytest assert
    assert error.url == URL  # nosec B101 - pytest assert


def test_crashing_failed_handler_is_wrapped_once(make_client):
    client = make_client(lambda request: httpx.Response(502, headers={"Retry-After": "3"}))

    def broken(context):
        raise KeyError("missing")

    with pytest.raises(APICallError) as excinfo:
        post_json_to_api(
            URL,
            body={},
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=broken,
            client=client,
        )
    error = excinfo.value
    assert error.message == "Failed to process error response"  # nosec B101 - pytest assert
    assert error.status_code == 502  # nosec B101 - pytest assert
    assert error.response_headers["retry-after"] == "3"  # nosec B101 - pytest assert
    assert isinstance(error.cause, KeyError)  # nosec B101 - pytest assert


def test_crashing_success_handler_is_wrapped(make_client):
    client = make_client(lambda request: _ok_json({}))

    def broken(context):
        raise RuntimeError("bad")

    with pytest.raises(APICallError) as excinfo:
        post_json_to_api(
            URL,
            body={},
            successful_response_handler=broken,
            failed_response_handler=create_status_code_error_response_handler(),
            client=client,
        )
    assert excinfo.value.message == "Failed to process successful response"  # nosec B101 - pytest assert
    assert excinfo.value.status_code == 200  # nosec B101 - pytest assert


def test_api_call_error_from_success_handler_is_not_rewrapped(make_client):
    client = make_client(lambda request: _ok_json({}))
    original = APICallError(message="custom", url=URL)

    def raising(context):
        raise original

    with pytest.raises(APICallError) as excinfo:
        post_json_to_api(
            URL,
            body={},
            successful_response_handler=raising,
            failed_response_handler=create_status_code_error_response_handler(),
            client=client,
        )
    assert excinfo.value is original  # nosec B101 - pytest assert


def test_abort_from_handler_passes_through(make_client):
    client = make_client(lambda request: httpx.Response(500))

    def aborting(context):
        raise AbortError("stop")

    with pytest.raises(AbortError):
        post_json_to_api(
            URL,
            body={},
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=aborting,
            client=client,
        )


def test_cancelled_token_prevents_network_call(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        return _ok_json({})

    token = CancellationToken()
    token.cancel("user")
    with pytest.raises(AbortError):
        post_json_to_api(
            URL,
            body={},
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=create_status_code_error_response_handler(),
            cancellation=token,
            client=make_client(handler),
        )
    assert calls == []  # nosec B101 - pytest assert


def test_cancel_while_waiting_for_response_aborts(make_client):
    token = CancellationToken()

    def handler(request):
        token.cancel()
        return _ok_json({})

    with pytest.raises(AbortError):
        post_json_to_api(
            URL,
            body={},
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=create_status_code_error_response_handler(),
            cancellation=token,
            client=make_client(handler),
        )


def test_connect_error_becomes_retryable_api_call_error(make_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(APICallError) as excinfo:
        post_json_to_api(
            URL,
            body={"x": 1},
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=create_status_code_error_response_handler(),
            client=make_client(handler),
        )
    error = excinfo.value
    assert error.is_retryable  # nosec B101 - pytest assert
    assert error.status_code is None  # nosec B101 - pytest assert
    assert error.message.startswith("Cannot connect to API:")  # nosec B101 - pytest assert
    assert error.request_body_values == {"x": 1}  # nosec B101 - pytest assert


def test_unsupported_body_content_raises_type_error(make_client):
    with pytest.raises(TypeError, match="Unsupported body content type"):
        post_to_api(
            URL,
            body=RequestBody(content=12345, values=None),  # type: ignore[arg-type]
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=create_status_code_error_response_handler(),
            client=make_client(lambda request: _ok_json({})),
        )


def test_bytes_body_is_sent_verbatim(make_client):
    seen = []

    def handler(request):
        seen.append(request)
        return _ok_json({})

    post_to_api(
        URL,
        body=RequestBody(content=bytearray(b"\x00\x01raw"), values={"raw": True}),
        successful_response_handler=create_json_response_handler(),
        failed_response_handler=create_status_code_error_response_handler(),
        client=make_client(handler),
    )
    assert seen[0].content == b"\x00\x01raw"  # nosec B101 - pytest assert


def test_form_data_is_encoded_with_its_content_type(make_client):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(400, text="nope")

    form = FormData([("model", "m1"), ("tag", "a"), ("tag", "b")])
    with pytest.raises(APICallError) as excinfo:
        post_form_data_to_api(
            URL,
            form_data=form,
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=create_status_code_error_response_handler(),
            client=make_client(handler),
        )
    request = seen[0]
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"  # nosec B101
    assert request.content == b"model=m1&tag=a&tag=b"  # nosec B101 - pytest assert
    assert excinfo.value.request_body_values == {"model": "m1", "tag": "b"}  # nosec B101 - pytest assert


def test_non_exception_failed_value_is_wrapped(make_client):
    client = make_client(lambda request: httpx.Response(400))

    def returns_payload(context):
        context.response.read()
        return HandlerResult(value={"detail": "bad"})

    with pytest.raises(APICallError) as excinfo:
        post_json_to_api(
            URL,
            body={},
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=returns_payload,
            client=client,
        )
    assert excinfo.value.data == {"detail": "bad"}  # nosec B101 - pytest assert
    assert excinfo.value.status_code == 400  # nosec B101 - pytest assert


def test_non_finite_json_body_is_rejected_before_sending(make_client):
    calls = []

    def handler(request):
        calls.append(request)
        return _ok_json({})

    with pytest.raises(ValueError):
        post_json_to_api(
            URL,
            body={"temperature": float("nan")},
            successful_response_handler=create_json_response_handler(),
            failed_response_handler=create_status_code_error_response_handler(),
            client=make_client(handler),
        )
    assert calls == []  # nosec B101 - pytest assert
