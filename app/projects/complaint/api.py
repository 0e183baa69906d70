# app/projects/complaint/api.py
"""
민원 보조 전용 pass-through 엔드포인트.

- POST /text/transform  {"rawText": "..."} 또는 {"text": "..."} → {"formalText": "..."}
- POST /classify        {"text": "..."} → {"best_department", "reason", "confidence"}

모델 루프를 거치지 않고 orchestrator.call_tool()로 레지스트리를 직접 호출한다.
"""

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.core.errors import InvalidToolArgumentsError, ToolError
from app.core.logging import setup_logger
from app.projects.complaint.tools import ClassifierTool, KobartTool

logger = setup_logger("ComplaintAPI")


class TextRequest(BaseModel):
    rawText: Optional[str] = None
    text: Optional[str] = None

    def resolved(self) -> str:
        """원문 그대로. 공백 제거는 빈 값 검사에만 쓴다."""
        return self.rawText or self.text or ""


def create_complaint_router(orchestrator: Any) -> APIRouter:
    router = APIRouter(tags=["complaint"])

    def _call(name: str, text: str):
        if not text.strip():
            raise HTTPException(status_code=400, detail="text가 필요합니다.")
        try:
            return orchestrator.call_tool(name, {"text": text})
        except InvalidToolArgumentsError as e:
            raise HTTPException(status_code=400, detail=e.message)
        except ToolError as e:
            logger.error(f"[{name}] {e.kind}: {e.message}")
            raise HTTPException(status_code=500, detail={"error": f"{name} failed", **e.to_dict()})

    @router.post("/text/transform")
    def transform_text(req: TextRequest):
        return {"formalText": _call(KobartTool.name, req.resolved()).text}

    @router.post("/classify")
    def classify(req: TextRequest):
        return _call(ClassifierTool.name, req.resolved()).model_dump()

    return router
