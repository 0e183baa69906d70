from app.core.orchestration.orchestrator import AgentOrchestrator
from app.core.orchestration.defaults import make_error_event, make_tool_error_message
from app.core.orchestration.turn import ConversationTurn, FinalAnswer, ToolCallDecision, TurnStatus
from app.core.orchestration.manifest_loader import load_card, load_yaml

__all__ = [
    "AgentOrchestrator",
    "make_error_event",
    "make_tool_error_message",
    "ConversationTurn",
    "FinalAnswer",
    "ToolCallDecision",
    "TurnStatus",
    "load_card",
    "load_yaml",
]
