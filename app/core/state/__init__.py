# app/core/state/__init__.py
from app.core.state.stores import InMemoryConversationStore

__all__ = ["InMemoryConversationStore"]
