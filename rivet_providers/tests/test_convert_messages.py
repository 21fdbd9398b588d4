"""Unit tests for neutral prompt -> Rivet wire message conversion."""

from __future__ import annotations

import base64
import json

import httpx
import pytest

from rivet_providers.base.errors import UnsupportedFunctionalityError
from rivet_providers.base.models import (
    ContentOutput,
    ConversationTurn,
    ErrorJsonOutput,
    ErrorTextOutput,
    FilePart,
    JsonOutput,
    ReasoningPart,
    TextOutput,
    TextPart,
    ToolCallPart,
    ToolResultPart,
)
from rivet_providers.rivet import convert_to_base64, convert_to_rivet_chat_messages, to_wire


def _wire(*turns: ConversationTurn):
    return to_wire(convert_to_rivet_chat_messages(list(turns)))


def test_system_content_is_copied_verbatim():
    out = _wire(ConversationTurn(role="system", content="be brief"))
    assert out == [{"type": "system", "message": "be brief"}]  # nosec B101 - pytest assert


def test_single_text_part_becomes_plain_string():
    out = _wire(ConversationTurn(role="user", content=[TextPart("hello")]))
    assert out == [{"type": "user", "message": "hello"}]  # nosec B101 - pytest assert


def test_text_and_image_bytes_become_part_list():
    png = b"\x89PNG\r\n"
    out = _wire(
        ConversationTurn(role="user", content=[TextPart("look"), FilePart(media_type="image/png", data=png)])
    )
    expected_url = "data:image/png;base64," + base64.b64encode(png).decode("ascii")
    assert out[0]["message"] == [  # nosec B101 - pytest assert
        "look",
        {"type": "url", "mediaType": "image/png", "url": expected_url},
    ]


def test_wildcard_image_type_is_coerced_to_jpeg():
    out = _wire(ConversationTurn(role="user", content=[FilePart(media_type="image/*", data=b"\xff\xd8\xff")]))
    part = out[0]["message"][0]
    assert part["mediaType"] == "image/jpeg"  # nosec B101 - pytest assert
    assert part["url"].startswith("data:image/jpeg;base64,")  # nosec B101 - pytest assert


def test_image_url_reference_is_forwarded():
    url = httpx.URL("https://example.com/cat.gif")
    out = _wire(ConversationTurn(role="user", content=[FilePart(media_type="image/gif", data=url)]))
    assert out[0]["message"][0]["url"] == "https://example.com/cat.gif"  # nosec B101 - pytest assert


def test_base64_string_data_is_not_reencoded():
    out = _wire(ConversationTurn(role="user", content=[FilePart(media_type="image/png", data="AAAA")]))
    assert out[0]["message"][0]["url"] == "data:image/png;base64,AAAA"  # nosec B101 - pytest assert


def test_unsupported_image_type_names_media_type():
    turn = ConversationTurn(role="user", content=[FilePart(media_type="image/webp", data=b"x")])
    with pytest.raises(UnsupportedFunctionalityError) as excinfo:
        convert_to_rivet_chat_messages([turn])
    assert "image/webp" in str(excinfo.value)  # nosec B101 - pytest assert


@pytest.mark.parametrize("media_type", ["application/pdf", "text/plain", "audio/wav"])
def test_non_image_file_is_rejected(media_type):
    turn = ConversationTurn(role="user", content=[TextPart("see file"), FilePart(media_type=media_type, data=b"x")])
    with pytest.raises(UnsupportedFunctionalityError):
        convert_to_rivet_chat_messages([turn])


def test_unexpected_user_part_is_rejected():
    turn = ConversationTurn(role="user", content=[ReasoningPart("hmm")])
    with pytest.raises(UnsupportedFunctionalityError):
        convert_to_rivet_chat_messages([turn])


def test_assistant_concatenates_text_and_reasoning_in_order():
    out = _wire(
        ConversationTurn(role="assistant", content=[ReasoningPart("think. "), TextPart("answer"), TextPart("!")])
    )
    assert out == [{"type": "assistant", "message": "think. answer!"}]  # nosec B101 - pytest assert


def test_assistant_without_tool_calls_omits_function_calls():
    out = _wire(ConversationTurn(role="assistant", content=[TextPart("hi")]))
    assert "function_calls" not in out[0]  # nosec B101 - pytest assert


def test_assistant_tool_calls_are_collected():
    args_a = {"city": "Paris", "units": ["c"]}
    args_b = {}
    out = _wire(
        ConversationTurn(
            role="assistant",
            content=[
                TextPart("checking"),
                ToolCallPart(tool_call_id="call-1", tool_name="weather", input=args_a),
                ToolCallPart(tool_call_id="call-2", tool_name="time", input=args_b),
            ],
        )
    )
    assert len(out) == 1  # nosec B101 - pytest assert
    calls = out[0]["function_calls"]
    assert [c["id"] for c in calls] == ["call-1", "call-2"]  # nosec B101 - pytest assert
    assert [c["name"] for c in calls] == ["weather", "time"]  # nosec B101 - pytest assert
    assert calls[0]["arguments"] == json.dumps(args_a)  # nosec B101 - pytest assert
    assert calls[1]["arguments"] == "{}"  # nosec B101 - pytest assert
    assert out[0]["message"] == "checking"  # nosec B101 - pytest assert


def test_assistant_unexpected_part_names_the_type():
    turn = ConversationTurn(role="assistant", content=[FilePart(media_type="image/png", data=b"x")])
    with pytest.raises(ValueError, match="file"):
        convert_to_rivet_chat_messages([turn])


def test_tool_turn_emits_one_function_message_per_result():
    turn = ConversationTurn(
        role="tool",
        content=[
            ToolResultPart("c1", "a", TextOutput("plain")),
            ToolResultPart("c2", "b", ErrorTextOutput("boom")),
            ToolResultPart("c3", "c", JsonOutput({"ok": True})),
            ToolResultPart("c4", "d", ErrorJsonOutput({"code": 1})),
            ToolResultPart("c5", "e", ContentOutput([{"type": "text", "text": "x"}])),
        ],
    )
    out = _wire(turn)
    assert [m["type"] for m in out] == ["function"] * 5  # nosec B101 - pytest assert
    assert [m["name"] for m in out] == ["c1", "c2", "c3", "c4", "c5"]  # nosec B101 - pytest assert
    assert out[0]["message"] == "plain"  # nosec B101 - pytest assert
    assert out[1]["message"] == "boom"  # nosec B101 - pytest assert
    assert json.loads(out[2]["message"]) == {"ok": True}  # nosec B101 - pytest assert
    assert json.loads(out[3]["message"]) == {"code": 1}  # nosec B101 - pytest assert
    assert json.loads(out[4]["message"]) == [{"type": "text", "text": "x"}]  # nosec B101 - pytest assert


def test_turn_order_is_preserved():
    out = _wire(
        ConversationTurn(role="system", content="sys"),
        ConversationTurn(role="user", content=[TextPart("q")]),
        ConversationTurn(role="assistant", content=[ToolCallPart("c1", "f", {"x": 1})]),
        ConversationTurn(role="tool", content=[ToolResultPart("c1", "f", TextOutput("r"))]),
        ConversationTurn(role="assistant", content=[TextPart("done")]),
    )
    assert [m["type"] for m in out] == ["system", "user", "assistant", "function", "assistant"]  # nosec B101


def test_unknown_role_fails():
    with pytest.raises(ValueError, match="Unsupported role"):
        convert_to_rivet_chat_messages([ConversationTurn(role="narrator", content=[])])  # type: ignore[arg-type]


def test_conversion_fails_fast_without_partial_output():
    prompt = [
        ConversationTurn(role="user", content=[TextPart("ok")]),
        ConversationTurn(role="user", content=[FilePart(media_type="application/pdf", data=b"%PDF")]),
    ]
    with pytest.raises(UnsupportedFunctionalityError):
        convert_to_rivet_chat_messages(prompt)


def test_convert_to_base64_accepts_bytes_and_strings():
    assert convert_to_base64(b"hi") == "aGk="  # nosec B101 - pytest assert
    assert convert_to_base64("aGk=") == "aGk="  # nosec B101 - pytest assert


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_tool_input_is_rejected(bad):
    turn = ConversationTurn(role="assistant", content=[ToolCallPart("c1", "f", {"x": bad})])
    with pytest.raises(ValueError):
        convert_to_rivet_chat_messages([turn])


def test_non_finite_tool_result_is_rejected():
    turn = ConversationTurn(role="tool", content=[ToolResultPart("c1", "f", JsonOutput({"x": float("nan")}))])
    with pytest.raises(ValueError):
        convert_to_rivet_chat_messages([turn])
