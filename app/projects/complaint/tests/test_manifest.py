# app/projects/complaint/tests/test_manifest.py
"""project.yaml 기반 조립: 시작 시점 설정 오류는 요청 전에 실패한다."""

from unittest.mock import patch

import pytest

from app.core.config import Settings
from app.core.errors import ConfigurationError, DuplicateToolError
from app.core.orchestration import load_yaml
from app.projects.complaint.manifest import PROJECT_ROOT, load_manifest
from app.projects.complaint.tests.mock_http import fake_session
from app.projects.complaint.tests.mock_llm import ScriptedLLM, text_response


def _settings(**overrides):
    return Settings(**{"OPENAI_API_KEY": "", "AGENT_MAX_TOOL_HOPS": 3, **overrides})


def _project(**overrides):
    data = load_yaml(PROJECT_ROOT)
    data.update(overrides)
    return data


def test_manifest_registers_project_tools_in_order():
    manifest = load_manifest(_settings(), llm=ScriptedLLM(text_response("ok")), session=fake_session())
    registry = manifest["registry"]

    assert registry.frozen
    assert registry.names() == [
        "polish_to_complaint_tone",
        "extract_text_from_image",
        "classify_department",
    ]
    orchestrator = manifest["orchestrator"]
    assert orchestrator.registry is registry
    assert orchestrator.sessions is manifest["sessions"]
    assert orchestrator.max_tool_hops == 3
    assert orchestrator.model == "gpt-4o-mini"


def test_missing_credentials_fail_at_startup():
    with pytest.raises(ConfigurationError):
        load_manifest(_settings(), session=fake_session())


def test_duplicate_tool_name_fails_at_startup():
    project = _project(tools=["polish_to_complaint_tone", "classify_department", "polish_to_complaint_tone"])
    with patch("app.projects.complaint.manifest.load_yaml", return_value=project):
        with pytest.raises(DuplicateToolError):
            load_manifest(_settings(), llm=ScriptedLLM(text_response("ok")), session=fake_session())


def test_unknown_tool_name_fails_at_startup():
    project = _project(tools=["polish_to_complaint_tone", "send_email"])
    with patch("app.projects.complaint.manifest.load_yaml", return_value=project):
        with pytest.raises(ConfigurationError, match="send_email"):
            load_manifest(_settings(), llm=ScriptedLLM(text_response("ok")), session=fake_session())


def test_missing_card_fails_at_startup():
    project = _project(agents={
        "orchestrator": {"card": "agents/complaint_agent/card.json"},
        "classifier": {"card": "agents/nowhere/card.json"},
    })
    with patch("app.projects.complaint.manifest.load_yaml", return_value=project):
        with pytest.raises(ConfigurationError):
            load_manifest(_settings(), llm=ScriptedLLM(text_response("ok")), session=fake_session())


def test_http_tools_do_not_share_a_session_by_default():
    manifest = load_manifest(_settings(), llm=ScriptedLLM(text_response("ok")))
    registry = manifest["registry"]
    for name in ("polish_to_complaint_tone", "extract_text_from_image"):
        tool = registry.get(name).executor.__self__
        assert tool.session is None
