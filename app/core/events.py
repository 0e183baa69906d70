# app/core/events.py
"""
Orchestrator가 yield하는 이벤트 타입 상수. SSE 스트림으로도 그대로 전달된다.

이벤트는 항상 {"event": EventType, "payload": dict} 형태다.

────────────────────────────────────────────────────────
  한 턴의 이벤트 흐름 예시 (부서 분류 요청):

  TOOL_CALL    {"tool": "classify_department", "arguments": "{\"text\": \"...\"}", "hop": 1}
  TOOL_RESULT  {"tool": "classify_department", "result": {"best_department": "도로교통과", ...}}
  DONE         {"message": "도로교통과에 접수하시면 됩니다.", "status": "completed", "turn": {...}}
────────────────────────────────────────────────────────
"""

from enum import Enum


class EventType(str, Enum):
    TOOL_CALL = "TOOL_CALL"
    """
    모델이 tool 호출을 결정함. dispatch 직전에 emit.

    payload 필드:
      tool       str  모델이 요청한 tool 이름
      arguments  str  모델이 만든 raw 인자 (검증 전)
      hop        int  이번 턴에서 몇 번째 tool-call 응답인지 (1-based)
    """

    TOOL_RESULT = "TOOL_RESULT"
    """
    tool 실행 성공.

    payload 필드:
      tool    str   tool 이름
      result  dict  출력 스키마로 검증된 결과
    """

    TOOL_ERROR = "TOOL_ERROR"
    """
    dispatch 실패. 턴은 이 직후 DONE(status="tool_error")으로 끝난다.

    payload 필드:
      kind     str  "unknown_tool" | "invalid_arguments" | "tool_failed"
      tool     str  요청된 tool 이름
      message  str  원인
    """

    DONE = "DONE"
    """
    한 턴의 최종 응답. 항상 마지막에 한 번 yield된다.

    payload 필드:
      message  str   사용자에게 표시할 최종 메시지
      status   str   "completed" | "hop_limit_exceeded" | "tool_error" | "error"
      turn     dict  ConversationTurn.to_dict() — 모델 결정·tool 결과 기록
      error    dict  (실패 시) {"kind", "tool", "message"}
    """
