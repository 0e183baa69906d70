# app/projects/complaint/tools/kobart_tool.py
"""
KobartTool: 민원 문체 변환 (best-effort).

  POST {KOBART_SERVICE_URL}/kgpt/polish  {"text": ...}

서비스 장애(네트워크 오류, 2xx 이외 응답, JSON 아님, 결과 필드 없음)는 호출자에게
전파하지 않는다. 로그만 남기고 원문을 그대로 반환한다.
"""

from typing import Optional

import requests

from app.core.http import post_with_retry
from app.core.logging import setup_logger
from app.core.tools.base_tool import BaseTool
from app.projects.complaint.schemas import TextInput, TransformedText

# 응답에서 변환 결과를 찾는 필드 우선순위
RESULT_FIELDS = ("transformed_text", "formalText", "text")


class KobartTool(BaseTool):
    name = "polish_to_complaint_tone"
    description = "사용자가 텍스트를 입력하면 민원 문체(격식 있는 존댓말)로 바꿔줍니다."
    input_model = TextInput
    output_model = TransformedText

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
        max_retry: int = 1,
        backoff_sec: float = 0.5,
    ):
        self.url = f"{base_url.rstrip('/')}/kgpt/polish"
        self.session = session
        self.timeout = timeout
        self.max_retry = max_retry
        self.backoff_sec = backoff_sec
        self.logger = setup_logger("KobartTool")

    def run(self, payload: TextInput) -> TransformedText:
        return TransformedText(text=self.polish_to_complaint_tone(payload.text))

    def polish_to_complaint_tone(self, text: str) -> str:
        try:
            resp = post_with_retry(
                self.session,
                self.url,
                json={"text": text},
                headers={"Content-Type": "application/json", "Accept": "application/json"},
                timeout=self.timeout,
                max_retry=self.max_retry,
                backoff_sec=self.backoff_sec,
                logger=self.logger,
            )
            resp.raise_for_status()
            result = resp.json()
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"[KobartTool] Error: {type(e).__name__}: {e}")
            self.logger.info("[KobartTool] Fallback: returning original text")
            return text

        transformed = pick_transformed_text(result)
        if transformed is None:
            self.logger.warning(f"[KobartTool] 응답에 변환 결과 필드 없음 — keys={list(result) if isinstance(result, dict) else type(result).__name__}")
            return text
        return transformed


def pick_transformed_text(result) -> Optional[str]:
    """RESULT_FIELDS 순서대로 비어 있지 않은 문자열 값을 찾는다."""
    if not isinstance(result, dict):
        return None
    for key in RESULT_FIELDS:
        value = result.get(key)
        if isinstance(value, str) and value:
            return value
    return None
