# app/core/tools/base_tool.py
"""
BaseTool: class-bound tool 기반 클래스.

─── 등록 흐름 ────────────────────────────────────────────────────────────────
  1. BaseTool 상속 → name·description·input_model·output_model 정의 → run() 구현
  2. 프로젝트 manifest의 tool factory map에 한 줄 추가
  3. project.yaml "tools" 목록에 이름 추가
  4. build_registry()가 registration()으로 ToolEntry를 만들어 등록

─── 프로바이더 중립 스키마 ─────────────────────────────────────────────────
  contract.function_schema() 반환값:
  {
      "name": "classify_department",
      "description": "민원 텍스트의 담당 부서를 분류합니다.",
      "parameters": {
          "type": "object",
          "properties": {"text": {"type": "string", "minLength": 1, ...}},
          "required": ["text"],
          "additionalProperties": false,
      },
  }
  OpenAIClient가 chat() 내부에서 {"type": "function", "function": schema}로 변환한다.
"""

from abc import ABC, abstractmethod
from typing import Type

from pydantic import BaseModel

from app.core.tools.contract import CapabilityContract, ProtocolKind, ToolEntry


class BaseTool(ABC):
    """모든 class-bound Tool의 기반 클래스."""

    name: str                       # 레지스트리 키이자 모델이 호출하는 함수 이름
    description: str                # 모델이 읽는 설명. 언제 호출할지 판단 근거가 된다
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]

    @property
    def contract(self) -> CapabilityContract:
        return CapabilityContract(
            name=self.name,
            description=self.description,
            input_schema=self.input_model,
            output_schema=self.output_model,
        )

    def registration(self) -> ToolEntry:
        return ToolEntry(contract=self.contract, protocol=ProtocolKind.CLASS, executor=self.run)

    @abstractmethod
    def run(self, payload: BaseModel) -> BaseModel:
        """
        검증된 입력 모델을 받아 output_model 인스턴스를 반환한다.
        복구 불가 실패는 ToolExecutionError로 raise한다.
        """
        raise NotImplementedError
