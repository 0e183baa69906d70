# app/core/tools/contract.py
"""
Capability Contract: tool이 "무엇을 받고 무엇을 돌려주는지"에 대한 타입 명세.

─── 역할 ─────────────────────────────────────────────────────────────────────
  - input_schema/output_schema는 Pydantic 모델 클래스다.
  - function_schema()가 모델에게 보여줄 function-calling 스키마를 만든다.
  - validate_input()이 dispatch 전에 모델 인자를 다시 검증한다.
    모델이 만든 인자는 타입이 보장된 값이 아니라 신뢰할 수 없는 외부 입력이다.

─── 등록 단위 ───────────────────────────────────────────────────────────────
  ToolEntry = (contract, protocol, executor)
    protocol=CLASS : 프로세스 내부 executor(callable)를 검증된 인자로 직접 호출
    protocol=HTTP  : 검증된 인자를 원격 엔드포인트로 전달 (HttpToolExecutor)
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Type

from pydantic import BaseModel, ValidationError

from app.core.errors import InvalidToolArgumentsError, ToolExecutionError


class ProtocolKind(str, Enum):
    CLASS = "class"
    HTTP = "http"


def decode_arguments(tool: str, arguments: Any) -> dict:
    """
    모델 인자(raw JSON 문자열 또는 dict) → dict.
    JSON 객체가 아니면 InvalidToolArgumentsError. 빈 문자열/None은 빈 인자로 본다.
    """
    if arguments is None or arguments == "":
        return {}
    if isinstance(arguments, Mapping):
        return dict(arguments)
    if isinstance(arguments, (str, bytes)):
        try:
            decoded = json.loads(arguments)
        except ValueError as e:
            raise InvalidToolArgumentsError(tool, f"arguments are not valid JSON: {e}")
        if isinstance(decoded, dict):
            return decoded
    raise InvalidToolArgumentsError(tool, f"arguments must be a JSON object, got {type(arguments).__name__}")


def _summarize(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in e.errors()
    )


@dataclass(frozen=True)
class CapabilityContract:
    name: str
    description: str
    input_schema: Type[BaseModel]
    output_schema: Type[BaseModel]

    def function_schema(self) -> dict:
        """
        프로바이더 중립 포맷의 tool 정의.
        {"name": ..., "description": ..., "parameters": <input_schema JSON Schema>}
        """
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.input_schema.model_json_schema(),
        }

    def validate_input(self, arguments: Any) -> BaseModel:
        data = decode_arguments(self.name, arguments)
        try:
            return self.input_schema.model_validate(data)
        except ValidationError as e:
            raise InvalidToolArgumentsError(self.name, _summarize(e))

    def validate_output(self, value: Any) -> BaseModel:
        if isinstance(value, self.output_schema):
            return value
        if isinstance(value, BaseModel):
            value = value.model_dump()
        try:
            return self.output_schema.model_validate(value)
        except ValidationError as e:
            raise ToolExecutionError(self.name, f"output does not match {self.output_schema.__name__}: {_summarize(e)}")


@dataclass(frozen=True)
class ToolEntry:
    """레지스트리 등록 단위. 등록 후 변경되지 않는다."""

    contract: CapabilityContract
    protocol: ProtocolKind
    executor: Callable[[BaseModel], Any]

    @property
    def name(self) -> str:
        return self.contract.name

    @classmethod
    def http(cls, contract: CapabilityContract, endpoint: str, **executor_kwargs) -> "ToolEntry":
        """원격 엔드포인트로 호출을 전달하는 http-bound 등록."""
        from app.core.tools.http_tool import HttpToolExecutor

        return cls(
            contract=contract,
            protocol=ProtocolKind.HTTP,
            executor=HttpToolExecutor(endpoint, tool=contract.name, **executor_kwargs),
        )
