# app/core/config.py
import os
from pathlib import Path
from pydantic import BaseModel
from dotenv import load_dotenv

from app.core.errors import ConfigurationError

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


class Settings(BaseModel):
    APP_NAME: str = os.getenv("APP_NAME", "complaint-agent")

    # 서버
    BACKEND_HOST: str = os.getenv("BACKEND_HOST", "0.0.0.0")
    BACKEND_PORT: int = int(os.getenv("BACKEND_PORT", "9000"))
    DEV_MODE: bool = os.getenv("DEV_MODE", "true").lower() == "true"

    # API Keys
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")

    # 다운스트림 서비스 (KoBART 문체 변환 / OCR)
    KOBART_SERVICE_URL: str = os.getenv("KOBART_SERVICE_URL", "http://localhost:8000")
    OCR_SERVICE_URL: str = os.getenv("OCR_SERVICE_URL", "http://localhost:7001")

    # 다운스트림 호출 정책: 타임아웃 + 일시적 네트워크 오류 재시도 횟수
    HTTP_TIMEOUT_SEC: float = float(os.getenv("HTTP_TIMEOUT_SEC", "10"))
    HTTP_MAX_RETRY: int = int(os.getenv("HTTP_MAX_RETRY", "1"))
    HTTP_BACKOFF_SEC: float = float(os.getenv("HTTP_BACKOFF_SEC", "0.5"))

    # 한 턴에서 허용하는 tool-call 왕복 횟수
    AGENT_MAX_TOOL_HOPS: int = int(os.getenv("AGENT_MAX_TOOL_HOPS", "5"))

    MEMORY_MAX_RAW_TURNS: int = int(os.getenv("MEMORY_MAX_RAW_TURNS", "12"))

    LOG_DIR: str = os.getenv("LOG_DIR", "logs")
    LOG_FILE_NAME: str = os.getenv("LOG_FILE_NAME", "app.log")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "true").lower() == "true"

    def require_credentials(self) -> None:
        """프로세스 시작 시점에 호출. 필수 자격 증명이 없으면 요청을 받기 전에 실패한다."""
        if not self.OPENAI_API_KEY:
            raise ConfigurationError("OPENAI_API_KEY가 설정되지 않았습니다. .env 또는 환경변수를 확인하세요.")


settings = Settings()
