# app/core/orchestration/defaults.py
"""Orchestrator 공통 기본값. 에러 이벤트·사용자 안내 문구."""

from app.core.config import settings
from app.core.errors import ToolError
from app.core.events import EventType

HOP_LIMIT_MESSAGE = "요청을 처리하는 도중 도구 호출 한도에 도달했어요. 요청을 조금 더 구체적으로 말씀해주세요."


def make_error_event(exc: Exception | None = None) -> dict:
    """
    on_error 핸들러가 반환할 표준 에러 이벤트.
    예외 타입을 분류해 사용자에게 의미있는 메시지를 반환한다.
    스택은 포함하지 않고, DEV_MODE에서만 예외 타입과 메시지를 붙인다.
    """
    payload = {
        "message": _user_message(exc),
        "status": "error",
        "error": {"kind": _kind(exc)},
    }
    if exc and settings.DEV_MODE:
        payload["error"]["type"] = type(exc).__name__
        payload["error"]["message"] = str(exc)[:500]
    return {"event": EventType.DONE, "payload": payload}


def make_tool_error_message(exc: ToolError) -> str:
    """ToolError → 사용자 안내 문구."""
    if exc.kind == "unknown_tool":
        return f"요청한 기능('{exc.tool}')을 찾을 수 없어요. (unknown tool requested)"
    if exc.kind == "invalid_arguments":
        return f"'{exc.tool}' 실행에 필요한 정보가 올바르지 않아요: {exc.message}"
    return f"'{exc.tool}' 실행에 실패했어요: {exc.message}"


def _kind(exc: Exception | None) -> str:
    if isinstance(exc, ToolError):
        return exc.kind
    return "internal_error"


def _user_message(exc: Exception | None) -> str:
    """예외 타입 → 사용자 친화적 메시지 변환."""
    if exc is None:
        return "처리 중 오류가 발생했어요. 다시 시도해주세요."
    if isinstance(exc, ToolError):
        return make_tool_error_message(exc)

    msg = str(exc).lower()
    if "timeout" in msg or "timed out" in msg:
        return "응답 시간이 초과됐어요. 잠시 후 다시 시도해주세요."
    if "connection" in msg or "network" in msg:
        return "서버 연결에 문제가 있어요. 잠시 후 다시 시도해주세요."
    return f"예기치 않은 오류가 발생했어요. ({type(exc).__name__}) 다시 시도해주세요."
