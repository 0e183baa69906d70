# app/projects/complaint/departments.py
"""민원 담당 부서 목록. 분류기는 이 목록 밖의 값을 절대 반환하지 않는다."""

# 순서 유지: 모델에게 보여주는 enum 순서와 같다. 마지막 항목이 catch-all.
DEPARTMENTS = (
    "도로교통과",
    "공원녹지과",
    "청소행정과",
    "고용노동부",
    "교육청",
    "주차단속팀",
    "건축과",
    "도시계획과",
    "교통행정과",
    "기타",
)

CATCH_ALL = "기타"


def is_department(value) -> bool:
    return isinstance(value, str) and value in DEPARTMENTS
