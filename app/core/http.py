# app/core/http.py
"""다운스트림 HTTP 호출 공통 정책: 명시적 타임아웃 + 일시적 네트워크 오류에 한한 제한된 재시도."""

import logging
import time
from typing import Optional

import requests

# 재시도 대상. 4xx/5xx 응답은 재시도하지 않고 호출자에게 그대로 돌려준다.
TRANSIENT_ERRORS = (requests.ConnectionError, requests.Timeout)


def post_with_retry(
    session: Optional[requests.Session],
    url: str,
    *,
    timeout: float,
    max_retry: int = 1,
    backoff_sec: float = 0.5,
    logger: Optional[logging.Logger] = None,
    **kwargs,
) -> requests.Response:
    """
    POST를 최대 1 + max_retry 회 시도한다.

    session이 None이면 requests.post()로 호출마다 연결을 새로 연다.
    FastAPI 스레드풀의 요청들이 Session 하나를 공유하지 않도록 기본값은 None이다.
    Session 주입은 테스트용이다.

    Raises:
        requests.ConnectionError / requests.Timeout: 마지막 시도까지 실패한 경우
    """
    post = session.post if session is not None else requests.post
    for attempt in range(max_retry + 1):
        try:
            return post(url, timeout=timeout, **kwargs)
        except TRANSIENT_ERRORS as e:
            if attempt >= max_retry:
                raise
            if logger:
                logger.warning(f"[http] {url} retry {attempt + 1}/{max_retry}: {e}")
            time.sleep(backoff_sec * (attempt + 1))
