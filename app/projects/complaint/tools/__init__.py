from app.projects.complaint.tools.classifier_tool import ClassifierTool
from app.projects.complaint.tools.kobart_tool import KobartTool
from app.projects.complaint.tools.ocr_tool import OcrTool

__all__ = ["ClassifierTool", "KobartTool", "OcrTool"]
