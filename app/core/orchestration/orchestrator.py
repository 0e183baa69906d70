# app/core/orchestration/orchestrator.py
"""
AgentOrchestrator: 단일 대화 턴의 모델 ↔ tool 루프.

─── 상태 전이 ───────────────────────────────────────────────────────────────
  AwaitingModelDecision
      ├─ tool_calls 있음 → ToolCallRequested → Dispatching → AwaitingModelDecision
      └─ tool_calls 없음 → FinalAnswerProduced → Terminal

─── 단일 턴 실행 순서 ──────────────────────────────────────────────────────
  1. 세션 히스토리 로드     sessions.get_history(session_id)
  2. LLM 호출               registry.schemas()를 tools로 전달
  3. tool_calls 처리        TOOL_CALL → registry.dispatch() → TOOL_RESULT
                            결과를 tool 메시지로 추가하고 2로 돌아감
  4. 최종 답변              DONE (status="completed")
  5. 턴 기록 (finally)      sessions.append(session_id, turn)

─── 종료 조건 ──────────────────────────────────────────────────────────────
  - tool-call 응답이 max_tool_hops를 넘으면 dispatch 없이 종료.
    status="hop_limit_exceeded", 모델 텍스트 → 마지막 tool 결과 → 안내 문구 순으로 부분 답변.
  - ToolError(unknown_tool / invalid_arguments / tool_failed)는 무시하지 않는다.
    TOOL_ERROR 이벤트 후 DONE(status="tool_error", error={...})로 종료.
  - 그 외 예외(LLM 호출 실패 등)는 run_one_turn 밖으로 전파된다.
    handle()/handle_stream()이 on_error로 DONE 에러 이벤트를 만든다.

─── 동시성 ─────────────────────────────────────────────────────────────────
  한 턴 안에서는 LLM 요청을 한 번에 하나만 보낸다.
  서로 다른 세션은 동결된 ToolRegistry만 공유한다.
"""

import json
from typing import Any, Callable, Dict, Generator, List, Optional

from pydantic import BaseModel

from app.core.agents.base_agent import BaseAgent
from app.core.errors import ToolError
from app.core.events import EventType
from app.core.llm.base_client import BaseLLMClient
from app.core.logging import setup_logger
from app.core.orchestration.defaults import HOP_LIMIT_MESSAGE, make_error_event, make_tool_error_message
from app.core.orchestration.turn import ConversationTurn, ToolCallDecision, TurnStatus
from app.core.tools.registry import ToolRegistry


class AgentOrchestrator(BaseAgent):
    """
    tool-calling 에이전트 루프.

    Attributes:
        registry:       동결된 ToolRegistry (읽기 전용)
        sessions:       대화 저장소 (InMemoryConversationStore 등)
        max_tool_hops:  한 턴에서 허용하는 tool-call 응답 수
        history_turns:  LLM에 함께 보낼 이전 턴 수
    """

    def __init__(
        self,
        *,
        llm: BaseLLMClient,
        registry: ToolRegistry,
        sessions: Any,
        system_prompt: Optional[str] = None,
        llm_config: Optional[Dict[str, Any]] = None,
        max_tool_hops: int = 5,
        history_turns: int = 6,
        on_error: Optional[Callable[[Exception], dict]] = None,
    ):
        super().__init__(llm=llm, system_prompt=system_prompt, llm_config=llm_config)
        self.registry = registry
        self.sessions = sessions
        self.max_tool_hops = max_tool_hops
        self.history_turns = history_turns
        self._on_error = on_error
        self.logger = setup_logger("AgentOrchestrator")

    # ── 퍼블릭 API ────────────────────────────────────────────────────────────

    def run_one_turn(self, session_id: str, user_message: str) -> Generator[Dict[str, Any], None, None]:
        """단일 턴 실행. 이벤트 스트림을 yield하고 마지막에 DONE을 yield한다."""
        turn = ConversationTurn(user_input=user_message)
        messages: List[dict] = [
            *self.sessions.get_history(session_id, self.history_turns),
            {"role": "user", "content": user_message},
        ]
        schemas = self.registry.schemas()
        hops = 0

        try:
            while True:
                resp = self.complete(messages, tools=schemas or None, tool_choice="auto" if schemas else None)

                # tool_calls가 없으면 최종 답변 — 루프 종료
                if not resp.tool_calls:
                    turn.finish(TurnStatus.COMPLETED, resp.content or "")
                    break

                if hops >= self.max_tool_hops:
                    self.logger.warning(f"[{session_id}] tool hop limit reached ({self.max_tool_hops})")
                    turn.finish(TurnStatus.HOP_LIMIT_EXCEEDED, self._partial_answer(resp.content, turn))
                    break
                hops += 1

                messages.append(self.llm.build_assistant_message(resp))
                for tc in resp.tool_calls:
                    yield {"event": EventType.TOOL_CALL, "payload": {
                        "tool": tc.name, "arguments": tc.arguments, "hop": hops,
                    }}
                    decision = ToolCallDecision(name=tc.name, arguments=tc.arguments)
                    turn.decisions.append(decision)
                    try:
                        result = self.registry.dispatch(tc.name, tc.arguments)
                    except ToolError as e:
                        self.logger.warning(f"[{session_id}] tool error ({e.kind}) {tc.name}: {e.message}")
                        turn.finish(TurnStatus.TOOL_ERROR, make_tool_error_message(e), error=e.to_dict())
                        yield {"event": EventType.TOOL_ERROR, "payload": e.to_dict()}
                        break
                    decision.result = result.model_dump()
                    self.logger.info(f"[tool] {tc.name}({tc.arguments}) → {json.dumps(decision.result, ensure_ascii=False)[:120]}")
                    yield {"event": EventType.TOOL_RESULT, "payload": {"tool": tc.name, "result": decision.result}}
                    messages.append(self.llm.build_tool_result_message(tc.id, _serialize(result)))

                if turn.status == TurnStatus.TOOL_ERROR:
                    break
                # 루프 반복 — 모델이 최종 답변을 낼 때까지

        finally:
            if turn.status == TurnStatus.IN_PROGRESS:
                turn.finish(TurnStatus.ERROR, "")
            self.sessions.append(session_id, turn)

        payload = {"message": turn.answer, "status": turn.status.value, "turn": turn.to_dict()}
        if turn.error:
            payload["error"] = turn.error
        yield {"event": EventType.DONE, "payload": payload}

    def handle_stream(self, session_id: str, user_message: str) -> Generator[Dict[str, Any], None, None]:
        """
        SSE 스트리밍 엔드포인트용 래퍼.
        예외 발생 시 on_error 핸들러로 DONE 에러 이벤트를 emit한다.
        """
        try:
            yield from self.run_one_turn(session_id, user_message)
        except Exception as e:
            self.logger.error(f"[{session_id}] turn failed: {type(e).__name__}: {e}")
            yield self._error_event(e)

    def handle(self, session_id: str, user_message: str) -> Dict[str, Any]:
        """비스트리밍(REST) 엔드포인트용 래퍼. DONE 이벤트의 payload를 반환한다."""
        final: Dict[str, Any] = {}
        for event in self.handle_stream(session_id, user_message):
            if event.get("event") == EventType.DONE:
                final = event.get("payload") or {}
        return final

    def call_tool(self, name: str, arguments: Any) -> BaseModel:
        """
        모델을 거치지 않는 직접 호출. HTTP pass-through 엔드포인트가 사용한다.
        dispatch와 같은 검증을 거치며 ToolError를 그대로 전파한다.
        """
        return self.registry.dispatch(name, arguments)

    # ── 내부 ────────────────────────────────────────────────────────────────

    def _error_event(self, exc: Exception) -> dict:
        return self._on_error(exc) if self._on_error else make_error_event(exc)

    @staticmethod
    def _partial_answer(content: Optional[str], turn: ConversationTurn) -> str:
        if content:
            return content
        for decision in reversed(turn.tool_calls):
            if decision.result is not None:
                return json.dumps(decision.result, ensure_ascii=False)
        return HOP_LIMIT_MESSAGE


def _serialize(result: BaseModel) -> str:
    return json.dumps(result.model_dump(), ensure_ascii=False)
