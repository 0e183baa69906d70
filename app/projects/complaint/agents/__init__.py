from app.projects.complaint.agents.department_classifier import DepartmentClassifierAgent

__all__ = ["DepartmentClassifierAgent"]
