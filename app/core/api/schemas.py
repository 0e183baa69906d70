# app/core/api/schemas.py
"""서비스 진입점: 단일 orchestrate API용 Request/Response 스키마."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class OrchestrateRequest(BaseModel):
    """단일 턴 오케스트레이션 요청."""
    session_id: str = Field(..., description="세션 식별자")
    message: str = Field(..., min_length=1, description="사용자 메시지")


class OrchestrateResponse(BaseModel):
    """비스트리밍 응답: 턴 종료 시 DONE payload 한 건."""
    interaction: Dict[str, Any] = Field(default_factory=dict, description="DONE payload (message, status, turn, error)")


class HistoryResponse(BaseModel):
    session_id: str
    turns: List[Dict[str, Any]] = Field(default_factory=list)
