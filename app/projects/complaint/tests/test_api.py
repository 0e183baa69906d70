# app/projects/complaint/tests/test_api.py
"""HTTP 경계: orchestrate API + 민원 pass-through 엔드포인트."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.api import create_agent_router
from app.core.config import Settings
from app.projects.complaint.api import create_complaint_router
from app.projects.complaint.manifest import load_manifest
from app.projects.complaint.tests.mock_http import fake_session, make_response
from app.projects.complaint.tests.mock_llm import ScriptedLLM, text_response, tool_call_response


def _client(llm, session=None):
    manifest = load_manifest(Settings(OPENAI_API_KEY=""), llm=llm, session=session or fake_session())
    app = FastAPI()
    app.include_router(create_agent_router(manifest["orchestrator"]))
    app.include_router(create_complaint_router(manifest["orchestrator"]))
    return TestClient(app)


@pytest.fixture
def chat_client():
    return _client(ScriptedLLM(text_response("무엇을 도와드릴까요?")))


# ── /text/transform ─────────────────────────────────────────────────────────

def test_transform_returns_formal_text():
    session = fake_session(make_response(200, {"formalText": "보도블록 보수를 요청드립니다."}))
    client = _client(ScriptedLLM(text_response("unused")), session)
    resp = client.post("/text/transform", json={"rawText": "보도블록 깨졌음"})
    assert resp.status_code == 200
    assert resp.json() == {"formalText": "보도블록 보수를 요청드립니다."}


def test_transform_falls_back_to_original_text():
    session = fake_session(make_response(500))
    client = _client(ScriptedLLM(text_response("unused")), session)
    resp = client.post("/text/transform", json={"text": "보도블록 깨졌음"})
    assert resp.status_code == 200
    assert resp.json() == {"formalText": "보도블록 깨졌음"}


def test_transform_keeps_surrounding_whitespace():
    raw = "  보도블록 깨졌음\n"
    session = fake_session(make_response(500))
    client = _client(ScriptedLLM(text_response("unused")), session)
    resp = client.post("/text/transform", json={"rawText": raw})
    assert resp.status_code == 200
    assert resp.json() == {"formalText": raw}
    assert session.post.call_args.kwargs["json"] == {"text": raw}


def test_transform_requires_text(chat_client):
    resp = chat_client.post("/text/transform", json={"rawText": "   "})
    assert resp.status_code == 400


# ── /classify ───────────────────────────────────────────────────────────────

def test_classify_returns_department():
    llm = ScriptedLLM(tool_call_response(
        "pick_department", {"best_department": "청소행정과", "reason": "쓰레기 무단투기", "confidence": 0.85},
    ))
    resp = _client(llm).post("/classify", json={"text": "골목에 쓰레기가 쌓여 있어요"})
    assert resp.status_code == 200
    assert resp.json() == {"best_department": "청소행정과", "reason": "쓰레기 무단투기", "confidence": 0.85}


def test_classify_never_returns_unknown_department():
    llm = ScriptedLLM(tool_call_response("pick_department", {"best_department": "마법부", "confidence": 1}))
    resp = _client(llm).post("/classify", json={"text": "빗자루가 날아다녀요"})
    assert resp.status_code == 200
    assert resp.json()["best_department"] == "기타"
    assert resp.json()["confidence"] == 0.0


def test_classify_requires_text(chat_client):
    assert chat_client.post("/classify", json={}).status_code == 400


# ── /v1/agent ───────────────────────────────────────────────────────────────

def test_chat_returns_done_payload(chat_client):
    resp = chat_client.post("/v1/agent/chat", json={"session_id": "api-1", "message": "안녕"})
    assert resp.status_code == 200
    interaction = resp.json()["interaction"]
    assert interaction["message"] == "무엇을 도와드릴까요?"
    assert interaction["status"] == "completed"


def test_chat_rejects_empty_message(chat_client):
    resp = chat_client.post("/v1/agent/chat", json={"session_id": "api-1", "message": ""})
    assert resp.status_code == 422


def test_history_and_reset(chat_client):
    chat_client.post("/v1/agent/chat", json={"session_id": "api-2", "message": "안녕"})
    history = chat_client.get("/v1/agent/history", params={"session_id": "api-2"}).json()
    assert history["session_id"] == "api-2"
    assert [t["user_input"] for t in history["turns"]] == ["안녕"]

    chat_client.delete("/v1/agent/history", params={"session_id": "api-2"})
    assert chat_client.get("/v1/agent/history", params={"session_id": "api-2"}).json()["turns"] == []


def test_chat_stream_emits_sse_events(chat_client):
    resp = chat_client.post("/v1/agent/chat/stream", json={"session_id": "api-3", "message": "안녕"})
    assert resp.status_code == 200
    assert "text/event-stream" in resp.headers.get("content-type", "")
    assert "event: DONE" in resp.text
