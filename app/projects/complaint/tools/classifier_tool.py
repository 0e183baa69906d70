# app/projects/complaint/tools/classifier_tool.py
from app.core.tools.base_tool import BaseTool
from app.projects.complaint.agents.department_classifier import DepartmentClassifierAgent
from app.projects.complaint.schemas import ClassificationResult, TextInput


class ClassifierTool(BaseTool):
    """
    부서 분류 Tool. DepartmentClassifierAgent에 위임한다.

    사용 예시:
        "집 앞 도로에 포트홀이 생겼어요" → classify_department(text=...)
        → {"best_department": "도로교통과", "reason": "...", "confidence": 0.9}
    """

    name = "classify_department"
    description = "사용자가 관련 부서를 찾아달라고 하면 실행합니다. 민원 텍스트의 담당 부서를 분류합니다."
    input_model = TextInput
    output_model = ClassificationResult

    def __init__(self, classifier: DepartmentClassifierAgent):
        self.classifier = classifier

    def run(self, payload: TextInput) -> ClassificationResult:
        return self.classifier.run(payload.text)
