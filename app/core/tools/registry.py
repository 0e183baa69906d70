# app/core/tools/registry.py
"""
ToolRegistry: tool 이름 → ToolEntry 매핑 + dispatch.

─── 생명주기 ────────────────────────────────────────────────────────────────
  프로세스 시작 시 register()로 추가 (append-only) → freeze() → 이후 읽기 전용.
  동결된 레지스트리는 변경되지 않으므로 동시 요청에서 잠금 없이 읽는다.

─── dispatch 순서 ───────────────────────────────────────────────────────────
  1. 이름 조회         없으면 UnknownToolError
  2. 입력 검증         contract.validate_input() → InvalidToolArgumentsError
  3. executor 실행     ToolError는 그대로, 그 외 예외는 ToolExecutionError로 래핑
  4. 출력 검증         contract.validate_output()
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, List

from pydantic import BaseModel

from app.core.errors import ConfigurationError, DuplicateToolError, ToolError, ToolExecutionError, UnknownToolError
from app.core.logging import setup_logger
from app.core.tools.base_tool import BaseTool
from app.core.tools.contract import ToolEntry


class ToolRegistry:
    def __init__(self, entries: Iterable[ToolEntry] = ()):
        self._entries: Dict[str, ToolEntry] = {}
        self._frozen = False
        self.logger = setup_logger("ToolRegistry")
        for entry in entries:
            self.register(entry)

    # ── 등록 ─────────────────────────────────────────────────────────────────

    def register(self, entry: ToolEntry) -> None:
        if self._frozen:
            raise ConfigurationError(f"Registry is frozen; cannot register '{entry.name}'")
        if entry.name in self._entries:
            raise DuplicateToolError(entry.name)
        self._entries[entry.name] = entry

    def freeze(self) -> "ToolRegistry":
        self._entries = MappingProxyType(dict(self._entries))
        self._frozen = True
        self.logger.info(f"Registered {len(self._entries)} tools: {', '.join(self._entries)}")
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── 조회 ─────────────────────────────────────────────────────────────────

    def names(self) -> List[str]:
        return list(self._entries.keys())

    def get(self, name: str) -> ToolEntry:
        entry = self._entries.get(name)
        if entry is None:
            raise UnknownToolError(name)
        return entry

    def schemas(self) -> List[dict]:
        """모델에게 전달할 function-calling 스키마 목록 (등록 순서 유지)."""
        return [entry.contract.function_schema() for entry in self._entries.values()]

    # ── 실행 ─────────────────────────────────────────────────────────────────

    def dispatch(self, name: str, arguments: Any) -> BaseModel:
        """
        모델이 요청한 {name, arguments}를 실행한다.

        Args:
            name:      모델이 선택한 tool 이름
            arguments: 모델이 만든 raw JSON 문자열 또는 dict (신뢰하지 않음)

        Raises:
            UnknownToolError, InvalidToolArgumentsError, ToolExecutionError
        """
        entry = self.get(name)
        payload = entry.contract.validate_input(arguments)
        try:
            result = entry.executor(payload)
        except ToolError:
            raise
        except Exception as e:
            self.logger.error(f"[{name}] executor error: {type(e).__name__}: {e}")
            raise ToolExecutionError(name, f"{type(e).__name__}: {e}") from e
        return entry.contract.validate_output(result)


def build_registry(tools: Iterable[BaseTool], entries: Iterable[ToolEntry] = ()) -> ToolRegistry:
    """BaseTool 인스턴스 + 추가 ToolEntry(http-bound 등)로 동결된 레지스트리를 만든다."""
    registry = ToolRegistry()
    for tool in tools:
        registry.register(tool.registration())
    for entry in entries:
        registry.register(entry)
    return registry.freeze()
