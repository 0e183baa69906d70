# app/core/llm/__init__.py
from app.core.llm.base_client import BaseLLMClient, LLMResponse, ToolCall


def create_llm_client(settings) -> BaseLLMClient:
    """설정에서 자격 증명을 확인하고 OpenAI 클라이언트를 생성한다. 누락 시 ConfigurationError."""
    settings.require_credentials()
    from app.core.llm.openai_client import OpenAIClient
    return OpenAIClient(api_key=settings.OPENAI_API_KEY)


__all__ = ["BaseLLMClient", "LLMResponse", "ToolCall", "create_llm_client"]
