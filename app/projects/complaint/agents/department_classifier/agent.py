# app/projects/complaint/agents/department_classifier/agent.py
"""
DepartmentClassifierAgent: 민원 텍스트 → 닫힌 부서 목록 중 하나.

─── 2단계 검증 ───────────────────────────────────────────────────────────────
  1. 스키마 수준: best_department를 DEPARTMENTS enum으로 선언하고 pick_department 호출을 강제.
  2. 런타임 수준: 모델이 돌려준 값을 DEPARTMENTS와 다시 대조.
     enum 선언은 모델에 대한 힌트일 뿐 보장이 아니다.

─── fallback ─────────────────────────────────────────────────────────────────
  함수 호출 없음 / 다른 함수 호출 / 목록 밖의 값 / 모델 호출 예외
      → {"best_department": "기타", "reason": <사유>, "confidence": 0.0}
  이 에이전트는 모델 프로토콜 위반으로 예외를 던지지 않는다.
"""

import json
import math
from typing import Any

from app.core.agents.base_agent import BaseAgent
from app.projects.complaint.agents.department_classifier.prompt import (
    FUNCTION_NAME,
    get_function_schema,
    get_system_prompt,
)
from app.projects.complaint.departments import CATCH_ALL, is_department
from app.projects.complaint.schemas import ClassificationResult

REASON_NO_CALL = "구조화된 응답(함수 호출)이 생성되지 않았습니다."
REASON_CALL_FAILED = "분류 중 오류가 발생했습니다."
REASON_INVALID_LABEL = "분류 실패: 허용되지 않은 부서 값({value!r})이 반환되었습니다."


def parse_arguments(raw: Any) -> dict:
    """함수 호출 인자 파싱. 실패하면 빈 dict (분류를 중단하지 않는다)."""
    if isinstance(raw, dict):
        return raw
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def clamp_confidence(value: Any) -> float:
    """숫자가 아니거나 NaN/inf면 0, 그 외에는 [0, 1]로 자른다."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    return min(1.0, max(0.0, value))


def fallback(reason: str) -> ClassificationResult:
    return ClassificationResult(best_department=CATCH_ALL, reason=reason, confidence=0.0)


class DepartmentClassifierAgent(BaseAgent):

    @classmethod
    def get_system_prompt(cls) -> str:
        return get_system_prompt()

    def run(self, text: str) -> ClassificationResult:
        try:
            resp = self.complete(
                [{"role": "user", "content": text}],
                tools=[get_function_schema()],
                tool_choice=FUNCTION_NAME,
            )
        except Exception as e:
            self.logger.error(f"[classifier] LLM 호출 실패 ({type(e).__name__}): {e}")
            return fallback(REASON_CALL_FAILED)

        call = resp.tool_calls[0] if resp.tool_calls else None
        if call is None or call.name != FUNCTION_NAME:
            self.logger.warning(
                f"[classifier] 구조화 응답 없음 — tool_call={call.name if call else None!r}, "
                f"content={(resp.content or '')[:120]!r}"
            )
            return fallback(REASON_NO_CALL)

        return self.validate(parse_arguments(call.arguments))

    def validate(self, args: dict) -> ClassificationResult:
        """모델 인자 → ClassificationResult. 입력이 같으면 결과도 같다."""
        value = args.get("best_department")
        if not is_department(value):
            self.logger.warning(f"[classifier] 목록 밖의 부서 값: {value!r}")
            return fallback(REASON_INVALID_LABEL.format(value=value))

        reason = args.get("reason")
        return ClassificationResult(
            best_department=value,
            reason=reason if isinstance(reason, str) else "",
            confidence=clamp_confidence(args.get("confidence")),
        )
