# app/projects/complaint/schemas.py
"""
민원 보조 tool 입출력 스키마 (Pydantic 모델).

─── 용도 ────────────────────────────────────────────────────────────────────
  - 입력 모델: model_json_schema()가 모델에게 보여줄 function 파라미터가 되고,
               dispatch 전 모델 인자 검증에 다시 쓰인다. extra="forbid".
  - 출력 모델: ToolRegistry가 executor 결과를 검증하는 기준.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.projects.complaint.departments import DEPARTMENTS


class TextInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    text: str = Field(..., min_length=1, description="사용자가 입력한 민원 원문")


class ImageInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    image_path: str = Field(..., min_length=1, description="텍스트를 추출할 이미지 파일 경로")


class TransformedText(BaseModel):
    """문체 변환 결과. 서비스 장애 시 원문이 그대로 담긴다."""
    text: str


class ExtractedText(BaseModel):
    """OCR 추출 결과. 글자가 없으면 빈 문자열."""
    text: str


class ClassificationResult(BaseModel):
    """
    부서 분류 결과.

    best_department: DEPARTMENTS 중 하나 (모델 원본 값이 아니라 검증된 값)
    reason:          분류 근거 또는 실패 사유
    confidence:      0~1
    """
    best_department: str
    reason: str
    confidence: float = Field(..., ge=0.0, le=1.0)

    @field_validator("best_department")
    @classmethod
    def _known_department(cls, v: str) -> str:
        if v not in DEPARTMENTS:
            raise ValueError(f"unknown department: {v!r}")
        return v
