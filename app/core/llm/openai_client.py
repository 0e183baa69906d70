# app/core/llm/openai_client.py
"""
OpenAI API 클라이언트 — BaseLLMClient 구현.

system_prompt를 messages 앞에 prepend하고, tool 스키마와 tool_choice를 OpenAI 포맷으로 변환한다.
"""

from typing import Optional

from openai import OpenAI

from app.core.llm.base_client import BaseLLMClient, LLMResponse, ToolCall

_TOOL_CHOICE_MODES = ("auto", "required", "none")


class OpenAIClient(BaseLLMClient):
    """OpenAI API 래퍼. 프로세스 시작 시 한 번 생성해 주입한다."""

    def __init__(self, api_key: str):
        self.client = OpenAI(api_key=api_key)

    def chat(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        messages: list,
        timeout: Optional[float] = None,
        tools: Optional[list] = None,
        tool_choice: Optional[str] = None,
    ) -> LLMResponse:
        msgs = [{"role": "system", "content": system_prompt}, *messages]
        kwargs = dict(model=model, messages=msgs, temperature=temperature)
        # None을 넘기면 SDK 기본 타임아웃이 꺼진다
        if timeout is not None:
            kwargs["timeout"] = timeout
        if tools:
            kwargs["tools"] = [{"type": "function", "function": t} for t in tools]
            if tool_choice in _TOOL_CHOICE_MODES:
                kwargs["tool_choice"] = tool_choice
            elif tool_choice:
                kwargs["tool_choice"] = {"type": "function", "function": {"name": tool_choice}}

        resp = self.client.chat.completions.create(**kwargs)
        choice = resp.choices[0]

        tool_calls = []
        for tc in getattr(choice.message, "tool_calls", None) or []:
            # function 이외 타입(custom tool 등)은 구조화 응답으로 보지 않는다
            if getattr(tc, "type", "function") != "function":
                continue
            tool_calls.append(ToolCall(
                id=tc.id,
                name=tc.function.name,
                arguments=tc.function.arguments or "",
            ))

        return LLMResponse(
            content=(choice.message.content or "").strip() or None,
            tool_calls=tool_calls,
            _raw=choice.message,
        )
