# app/core/agents/base_agent.py
"""
BaseAgent: 단일 목적 LLM 호출 에이전트의 공통 기반 클래스.

─── 설계 원칙 ────────────────────────────────────────────────────────────────
  - Agent는 "입력 → 출력" 계산만 담당한다.
  - LLM 클라이언트는 생성자로 주입받는다. 모듈 전역 클라이언트를 만들지 않는다.
  - 모델·온도·타임아웃은 card.json "llm" 섹션에서 온다.

─── 새 Agent 작성 예시 ──────────────────────────────────────────────────────
  class MyAgent(BaseAgent):
      @classmethod
      def get_system_prompt(cls) -> str:
          return "당신은 도움이 되는 어시스턴트입니다."

      def run(self, text: str) -> dict:
          resp = self.complete([{"role": "user", "content": text}])
          return {"message": resp.content}
"""

from typing import Any, Dict, List, Optional

from app.core.llm.base_client import BaseLLMClient, LLMResponse
from app.core.logging import setup_logger

# card.json "llm" 섹션이 없을 때 사용하는 기본값
DEFAULT_LLM_CONFIG = {"model": "gpt-4o-mini", "temperature": 0, "timeout_sec": 60}


class BaseAgent:
    def __init__(
        self,
        *,
        llm: BaseLLMClient,
        system_prompt: Optional[str] = None,
        llm_config: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            llm:           주입된 LLM 클라이언트
            system_prompt: None이면 get_system_prompt() 결과를 사용
            llm_config:    card.json "llm" 섹션 {"model": "...", "temperature": 0, "timeout_sec": 30}
        """
        cfg = llm_config or DEFAULT_LLM_CONFIG
        self.llm = llm
        self.system_prompt = system_prompt if system_prompt is not None else self.get_system_prompt()
        self.model = cfg.get("model", DEFAULT_LLM_CONFIG["model"])
        self.temperature = cfg.get("temperature", 0.0)
        self.timeout = cfg.get("timeout_sec", DEFAULT_LLM_CONFIG["timeout_sec"])
        self.logger = setup_logger(self.__class__.__name__)

    @classmethod
    def get_system_prompt(cls) -> str:
        return "You are a helpful assistant."

    def complete(
        self,
        messages: List[dict],
        *,
        tools: Optional[List[dict]] = None,
        tool_choice: Optional[str] = None,
    ) -> LLMResponse:
        """카드 설정(model/temperature/timeout)으로 LLM을 1회 호출한다."""
        return self.llm.chat(
            model=self.model,
            temperature=self.temperature,
            system_prompt=self.system_prompt,
            messages=messages,
            timeout=self.timeout,
            tools=tools,
            tool_choice=tool_choice,
        )

    def run(self, *args, **kwargs) -> Any:
        raise NotImplementedError
