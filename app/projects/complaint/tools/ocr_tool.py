# app/projects/complaint/tools/ocr_tool.py
"""
OcrTool: 이미지 파일 → 텍스트.

  POST {OCR_SERVICE_URL}/ocr/extract  multipart "file"  →  {"ocr_text": "..."}

문체 변환과 달리 실패를 삼키지 않는다. 빈 문자열을 돌려주면 "글자 없음"과
구분할 수 없기 때문이다. 파일 확인은 네트워크 호출 전에 한다.
"""

import mimetypes
from pathlib import Path
from typing import Optional

import requests

from app.core.errors import ToolExecutionError
from app.core.http import post_with_retry
from app.core.logging import setup_logger
from app.core.tools.base_tool import BaseTool
from app.projects.complaint.schemas import ExtractedText, ImageInput


class OcrTool(BaseTool):
    name = "extract_text_from_image"
    description = "사용자에게 이미지 경로를 받으면 이미지에서 텍스트(자동차 번호판 등)를 추출합니다."
    input_model = ImageInput
    output_model = ExtractedText

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10,
        max_retry: int = 1,
        backoff_sec: float = 0.5,
    ):
        self.url = f"{base_url.rstrip('/')}/ocr/extract"
        self.session = session
        self.timeout = timeout
        self.max_retry = max_retry
        self.backoff_sec = backoff_sec
        self.logger = setup_logger("OcrTool")

    def run(self, payload: ImageInput) -> ExtractedText:
        return ExtractedText(text=self.extract_text_from_image(payload.image_path))

    def extract_text_from_image(self, image_path: str) -> str:
        path = Path(image_path)
        if not path.is_file():
            raise ToolExecutionError(self.name, f"Image file not found: {image_path}")
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ToolExecutionError(self.name, f"Image file not readable: {image_path} ({e})") from e

        mime = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        try:
            resp = post_with_retry(
                self.session,
                self.url,
                files={"file": (path.name, data, mime)},
                timeout=self.timeout,
                max_retry=self.max_retry,
                backoff_sec=self.backoff_sec,
                logger=self.logger,
            )
            resp.raise_for_status()
            result = resp.json()
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"[OcrTool] Error: {type(e).__name__}: {e}")
            raise ToolExecutionError(self.name, f"OCR 실행 실패: {e}") from e

        text = result.get("ocr_text") if isinstance(result, dict) else None
        return text if isinstance(text, str) else ""
