# app/core/tools/__init__.py
from app.core.tools.base_tool import BaseTool
from app.core.tools.contract import CapabilityContract, ProtocolKind, ToolEntry, decode_arguments
from app.core.tools.http_tool import HttpToolExecutor
from app.core.tools.registry import ToolRegistry, build_registry

__all__ = [
    "BaseTool",
    "CapabilityContract",
    "ProtocolKind",
    "ToolEntry",
    "decode_arguments",
    "HttpToolExecutor",
    "ToolRegistry",
    "build_registry",
]
