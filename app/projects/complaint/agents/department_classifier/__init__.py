from app.projects.complaint.agents.department_classifier.agent import DepartmentClassifierAgent

__all__ = ["DepartmentClassifierAgent"]
