# app/core/errors.py
"""
오류 분류.

─── 전파 정책 ───────────────────────────────────────────────────────────────
  ConfigurationError  — 프로세스 시작 시점 실패 (자격 증명 누락, tool 이름 중복 등).
                        요청 처리 중에는 발생하지 않는다.

  ToolError           — tool 호출 단위 실패. Orchestrator가 catch해서
                        {"kind", "tool", "message"} 형태로 호출자에게 전달한다.
    ├── UnknownToolError          모델이 등록되지 않은 tool 이름을 요청
    ├── InvalidToolArgumentsError 모델이 만든 인자가 JSON 객체가 아니거나 입력 스키마 위반
    └── ToolExecutionError        복구 불가 tool 실패 (이미지 없음, OCR 서비스 오류 등)

  복구 가능한 실패(문체 변환 서비스 장애)와 모델 프로토콜 위반(분류기)은
  tool 내부에서 흡수되므로 여기에 해당하지 않는다.
"""


class ConfigurationError(Exception):
    """시작 시점 설정 오류. 런타임에 복구하지 않는다."""


class DuplicateToolError(ConfigurationError):
    """같은 이름의 tool을 두 번 등록하려 함."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate tool name: '{name}'")
        self.name = name


class ToolError(Exception):
    kind = "tool_error"

    def __init__(self, tool: str, message: str):
        super().__init__(message)
        self.tool = tool
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "tool": self.tool, "message": self.message}


class UnknownToolError(ToolError):
    kind = "unknown_tool"

    def __init__(self, tool: str):
        super().__init__(tool, f"unknown tool requested: '{tool}'")


class InvalidToolArgumentsError(ToolError):
    kind = "invalid_arguments"


class ToolExecutionError(ToolError):
    kind = "tool_failed"
