# app/core/orchestration/turn.py
"""
한 턴(사용자 발화 1건)에 대한 기록.

  ConversationTurn
    user_input: 사용자 발화
    decisions:  모델 결정 목록 — ToolCallDecision 0개 이상 + (정상 종료 시) FinalAnswer 1개
    status:     TurnStatus
    error:      ToolError.to_dict() 등 실패 정보

세션 저장소에 누적되지만 영속화하지 않는다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class TurnStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    HOP_LIMIT_EXCEEDED = "hop_limit_exceeded"
    TOOL_ERROR = "tool_error"
    ERROR = "error"


@dataclass
class ToolCallDecision:
    name: str
    arguments: Any
    result: Optional[Dict[str, Any]] = None

    def to_dict(self) -> dict:
        return {"type": "tool_call", "name": self.name, "arguments": self.arguments, "result": self.result}


@dataclass
class FinalAnswer:
    text: str

    def to_dict(self) -> dict:
        return {"type": "final_answer", "text": self.text}


@dataclass
class ConversationTurn:
    user_input: str
    decisions: List[Union[ToolCallDecision, FinalAnswer]] = field(default_factory=list)
    status: TurnStatus = TurnStatus.IN_PROGRESS
    answer: str = ""
    error: Optional[Dict[str, Any]] = None

    @property
    def tool_calls(self) -> List[ToolCallDecision]:
        return [d for d in self.decisions if isinstance(d, ToolCallDecision)]

    def finish(self, status: TurnStatus, answer: str, error: Optional[dict] = None) -> None:
        self.status = status
        self.answer = answer
        self.error = error
        if status == TurnStatus.COMPLETED:
            self.decisions.append(FinalAnswer(answer))

    def to_dict(self) -> dict:
        return {
            "user_input": self.user_input,
            "decisions": [d.to_dict() for d in self.decisions],
            "status": self.status.value,
            "answer": self.answer,
            "error": self.error,
        }
