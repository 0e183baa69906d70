from app.core.api.router_factory import create_agent_router

__all__ = ["create_agent_router"]
