# app/core/api/router_factory.py
"""단일 orchestrate API 진입점. Request/Response 스키마 기준."""

import json
from typing import Any

from fastapi import APIRouter
from sse_starlette.sse import EventSourceResponse

from app.core.api.schemas import HistoryResponse, OrchestrateRequest, OrchestrateResponse


def create_agent_router(orchestrator: Any) -> APIRouter:
    """
    단일 오케스트레이션 진입점:
    - POST   /v1/agent/chat         : 비스트리밍
    - POST   /v1/agent/chat/stream  : 스트리밍 SSE
    - GET    /v1/agent/history      : 세션별 턴 기록
    - DELETE /v1/agent/history      : 세션 초기화

    동기 핸들러(def)로 선언해 스레드풀에서 실행한다. 세션 간 공유 상태는
    동결된 레지스트리뿐이므로 여러 대화를 동시에 처리할 수 있다.
    """
    router = APIRouter(prefix="/v1/agent", tags=["agent"])

    def _stream_events(session_id: str, message: str):
        for event in orchestrator.handle_stream(session_id, message):
            event_type = event.get("event", "")
            yield {
                "event": getattr(event_type, "value", event_type),
                "data": json.dumps(event.get("payload", {}), ensure_ascii=False),
            }

    @router.post("/chat", response_model=OrchestrateResponse)
    def orchestrate(req: OrchestrateRequest) -> OrchestrateResponse:
        return OrchestrateResponse(interaction=orchestrator.handle(req.session_id, req.message))

    @router.post("/chat/stream")
    def orchestrate_stream(req: OrchestrateRequest):
        return EventSourceResponse(_stream_events(req.session_id, req.message))

    @router.get("/history", response_model=HistoryResponse)
    def history(session_id: str) -> HistoryResponse:
        return HistoryResponse(session_id=session_id, turns=orchestrator.sessions.list_turns(session_id))

    @router.delete("/history", response_model=HistoryResponse)
    def reset_history(session_id: str) -> HistoryResponse:
        orchestrator.sessions.reset(session_id)
        return HistoryResponse(session_id=session_id, turns=[])

    return router
