# app/projects/complaint/agents/department_classifier/prompt.py
from app.projects.complaint.departments import CATCH_ALL, DEPARTMENTS

FUNCTION_NAME = "pick_department"
FUNCTION_DESCRIPTION = "민원 텍스트에 대한 최적 부서를 선택한다."

SYSTEM_PROMPT = (
    "입력 텍스트를 읽고, 아래 enum 목록 중 정확히 1개 부서를 선택하세요.\n"
    f"없으면 \"{CATCH_ALL}\"를 선택하세요.\n"
    f"반드시 {FUNCTION_NAME} 함수를 호출해 결과를 반환하고, 일반 텍스트로 답하지 마세요.\n\n"
    "부서 목록: {departments}"
)


def get_system_prompt() -> str:
    return SYSTEM_PROMPT.replace("{departments}", ", ".join(DEPARTMENTS))


def get_function_schema() -> dict:
    return {
        "name": FUNCTION_NAME,
        "description": FUNCTION_DESCRIPTION,
        "parameters": {
            "type": "object",
            "properties": {
                "best_department": {
                    "type": "string",
                    "enum": list(DEPARTMENTS),
                    "description": "부서 후보 목록 중 하나",
                },
                "reason": {
                    "type": "string",
                    "description": "한두 문장 근거",
                },
                "confidence": {
                    "type": "number",
                    "minimum": 0,
                    "maximum": 1,
                    "description": "0~1 신뢰도",
                },
            },
            "required": ["best_department", "reason", "confidence"],
            "additionalProperties": False,
        },
    }
