# app/projects/complaint/tests/test_registry.py
"""ToolRegistry: 등록 규칙과 dispatch 전 인자 검증."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests
from pydantic import BaseModel

from app.core.errors import (
    ConfigurationError,
    DuplicateToolError,
    InvalidToolArgumentsError,
    ToolExecutionError,
    UnknownToolError,
)
from app.core.http import post_with_retry
from app.core.tools import BaseTool, CapabilityContract, ProtocolKind, ToolEntry, ToolRegistry, build_registry
from app.projects.complaint.schemas import TextInput, TransformedText
from app.projects.complaint.tests.mock_http import fake_session, make_response


class UpperTool(BaseTool):
    name = "upper"
    description = "텍스트를 대문자로 바꿉니다."
    input_model = TextInput
    output_model = TransformedText

    def __init__(self):
        self.calls = []

    def run(self, payload: TextInput) -> TransformedText:
        self.calls.append(payload.text)
        return TransformedText(text=payload.text.upper())


class BrokenTool(UpperTool):
    name = "broken"

    def run(self, payload):
        raise KeyError("boom")


class WrongOutputTool(UpperTool):
    name = "wrong_output"

    def run(self, payload):
        return {"unexpected": 1}


# ── 등록 ─────────────────────────────────────────────────────────────────────

def test_duplicate_name_is_rejected():
    with pytest.raises(DuplicateToolError) as exc:
        build_registry([UpperTool(), UpperTool()])
    assert exc.value.name == "upper"
    assert isinstance(exc.value, ConfigurationError)


def test_frozen_registry_rejects_registration():
    registry = build_registry([UpperTool()])
    assert registry.frozen
    with pytest.raises(ConfigurationError):
        registry.register(BrokenTool().registration())
    assert registry.names() == ["upper"]


def test_schemas_follow_registration_order():
    registry = build_registry([UpperTool(), BrokenTool()])
    schemas = registry.schemas()
    assert [s["name"] for s in schemas] == ["upper", "broken"]
    params = schemas[0]["parameters"]
    assert params["required"] == ["text"]
    assert params["additionalProperties"] is False
    assert registry.get("upper").protocol == ProtocolKind.CLASS


# ── dispatch ────────────────────────────────────────────────────────────────

def test_dispatch_raw_json_arguments():
    tool = UpperTool()
    registry = build_registry([tool])
    result = registry.dispatch("upper", '{"text": "abc"}')
    assert result == TransformedText(text="ABC")
    assert tool.calls == ["abc"]


def test_unknown_tool():
    registry = build_registry([UpperTool()])
    with pytest.raises(UnknownToolError) as exc:
        registry.dispatch("delete_everything", "{}")
    assert exc.value.to_dict()["kind"] == "unknown_tool"
    assert exc.value.tool == "delete_everything"


@pytest.mark.parametrize("arguments", [
    "{not json",
    "[1, 2]",
    '"text"',
    "{}",
    '{"text": ""}',
    '{"text": 3}',
    '{"text": "ok", "extra": true}',
    42,
])
def test_invalid_arguments_never_reach_executor(arguments):
    tool = UpperTool()
    registry = build_registry([tool])
    with pytest.raises(InvalidToolArgumentsError) as exc:
        registry.dispatch("upper", arguments)
    assert exc.value.kind == "invalid_arguments"
    assert tool.calls == []


def test_executor_exception_is_wrapped():
    registry = build_registry([BrokenTool()])
    with pytest.raises(ToolExecutionError) as exc:
        registry.dispatch("broken", {"text": "x"})
    assert "KeyError" in exc.value.message


def test_output_is_validated():
    registry = build_registry([WrongOutputTool()])
    with pytest.raises(ToolExecutionError) as exc:
        registry.dispatch("wrong_output", {"text": "x"})
    assert "TransformedText" in exc.value.message


# ── http-bound ──────────────────────────────────────────────────────────────

class EchoOut(BaseModel):
    text: str


def test_http_bound_entry_posts_validated_arguments():
    session = fake_session(make_response(200, {"text": "원격 결과"}))
    contract = CapabilityContract(
        name="remote_echo", description="원격 echo", input_schema=TextInput, output_schema=EchoOut,
    )
    entry = ToolEntry.http(contract, "http://tools.test/echo", session=session, backoff_sec=0)
    registry = build_registry([], entries=[entry])

    assert registry.get("remote_echo").protocol == ProtocolKind.HTTP
    result = registry.dispatch("remote_echo", json.dumps({"text": "안녕"}))
    assert result == EchoOut(text="원격 결과")
    args, kwargs = session.post.call_args
    assert args[0] == "http://tools.test/echo"
    assert kwargs["json"] == {"text": "안녕"}


def test_http_bound_entry_remote_failure():
    session = fake_session(make_response(500))
    contract = CapabilityContract(
        name="remote_echo", description="원격 echo", input_schema=TextInput, output_schema=EchoOut,
    )
    registry = ToolRegistry([ToolEntry.http(contract, "http://tools.test/echo", session=session)]).freeze()
    with pytest.raises(ToolExecutionError):
        registry.dispatch("remote_echo", {"text": "x"})


# ── 재시도 정책 ─────────────────────────────────────────────────────────────

def test_post_with_retry_does_not_retry_error_status():
    session = fake_session(make_response(500), make_response(200))
    resp = post_with_retry(session, "http://x.test", timeout=1, max_retry=1, backoff_sec=0)
    assert resp.status_code == 500
    assert session.post.call_count == 1


def test_post_with_retry_gives_up_after_max_retry():
    session = fake_session(*[requests.Timeout("slow")] * 3)
    with pytest.raises(requests.Timeout):
        post_with_retry(session, "http://x.test", timeout=1, max_retry=2, backoff_sec=0)
    assert session.post.call_count == 3


def test_post_with_retry_does_not_retry_other_errors():
    session = MagicMock(spec=requests.Session)
    session.post.side_effect = requests.exceptions.InvalidURL("bad url")
    with pytest.raises(requests.exceptions.InvalidURL):
        post_with_retry(session, "bad", timeout=1, max_retry=3, backoff_sec=0)
    assert session.post.call_count == 1


def test_post_with_retry_without_session_uses_requests_post():
    with patch("app.core.http.requests.post", side_effect=[requests.ConnectionError("x"), make_response(200)]) as post:
        resp = post_with_retry(None, "http://x.test", timeout=3, max_retry=1, backoff_sec=0, json={"a": 1})
    assert resp.status_code == 200
    assert post.call_count == 2
    assert post.call_args.kwargs == {"timeout": 3, "json": {"a": 1}}
