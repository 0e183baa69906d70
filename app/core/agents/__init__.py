# app/core/agents/__init__.py
from app.core.agents.base_agent import BaseAgent, DEFAULT_LLM_CONFIG

__all__ = ["BaseAgent", "DEFAULT_LLM_CONFIG"]
