# app/core/llm/base_client.py
"""
LLM 프로바이더 추상화 인터페이스.

Orchestrator와 에이전트는 BaseLLMClient만 사용한다. 테스트는 이 인터페이스를
구현한 Mock을 주입해 실제 모델 호출 없이 tool-call 루프를 검증한다.

─── 설계 원칙 ────────────────────────────────────────────────────────────────
  - system_prompt를 messages와 분리 전달. 프로바이더가 내부에서 적절히 처리.
  - tool 스키마는 중립 포맷으로 전달. 프로바이더가 내부에서 자체 포맷으로 변환.
  - ToolCall.arguments는 모델이 만든 raw JSON 문자열 그대로 둔다.
    파싱·검증은 호출 측(ToolRegistry / 분류기)의 책임이다.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ToolCall:
    """프로바이더 독립적 tool call 표현."""
    id: str
    name: str
    arguments: str  # raw JSON (신뢰할 수 없는 입력)


@dataclass
class LLMResponse:
    """프로바이더 독립적 LLM 응답."""
    content: Optional[str] = None
    tool_calls: list[ToolCall] = field(default_factory=list)
    _raw: Any = None


class BaseLLMClient(ABC):
    """LLM 프로바이더 인터페이스."""

    @abstractmethod
    def chat(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        messages: list,
        timeout: Optional[float] = None,
        tools: Optional[list] = None,
        tool_choice: Optional[str] = None,
    ) -> LLMResponse:
        """
        동기 LLM 호출.

        Args:
            model:         모델명 (예: "gpt-4o-mini")
            temperature:   0=결정론적
            system_prompt: 시스템 프롬프트 (messages와 별도)
            messages:      [{"role": "user"|"assistant"|"tool", ...}]
            timeout:       초 단위 타임아웃
            tools:         중립 포맷 tool 스키마 리스트
            tool_choice:   "auto" | "required" | "none" | 강제할 함수 이름
        """
        ...

    def build_assistant_message(self, response: LLMResponse) -> dict:
        """tool-call 루프에서 assistant 메시지를 messages에 추가할 때 사용."""
        return {
            "role": "assistant",
            "content": response.content,
            "tool_calls": [
                {
                    "id": tc.id,
                    "type": "function",
                    "function": {"name": tc.name, "arguments": tc.arguments},
                }
                for tc in response.tool_calls
            ],
        }

    def build_tool_result_message(self, tool_call_id: str, content: str) -> dict:
        """tool 실행 결과를 messages에 추가할 때 사용."""
        return {"role": "tool", "tool_call_id": tool_call_id, "content": content}
