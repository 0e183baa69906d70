# app/core/tools/http_tool.py
"""
http-bound tool executor.

검증된 입력 모델을 JSON으로 원격 엔드포인트에 POST하고, 응답 JSON을 그대로 반환한다.
출력 스키마 검증은 ToolRegistry.dispatch()가 contract.validate_output()으로 수행한다.

사용 예시:
    entry = ToolEntry.http(contract, "http://tools.internal/v1/tools/summarize")
    registry = build_registry(tools, entries=[entry])
"""

from typing import Any, Optional

import requests
from pydantic import BaseModel

from app.core.errors import ToolExecutionError
from app.core.http import post_with_retry
from app.core.logging import setup_logger


class HttpToolExecutor:
    def __init__(
        self,
        endpoint: str,
        *,
        tool: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
        max_retry: int = 1,
        backoff_sec: float = 0.5,
    ):
        self.endpoint = endpoint
        self.tool = tool
        self.session = session
        self.timeout = timeout
        self.max_retry = max_retry
        self.backoff_sec = backoff_sec
        self.logger = setup_logger("HttpToolExecutor")

    def __call__(self, payload: BaseModel) -> Any:
        try:
            resp = post_with_retry(
                self.session,
                self.endpoint,
                json=payload.model_dump(),
                headers={"Accept": "application/json"},
                timeout=self.timeout,
                max_retry=self.max_retry,
                backoff_sec=self.backoff_sec,
                logger=self.logger,
            )
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"[{self.tool}] remote call failed: {e}")
            raise ToolExecutionError(self.tool, f"remote tool call failed: {e}") from e
