# app/core/state/stores.py
"""
범용 인메모리 대화 저장소.

프로덕션 환경에서는 Redis·RDB 기반 구현으로 교체 가능.
AgentOrchestrator가 기대하는 인터페이스:
  - get_history(session_id, last_n_turns) → [{"role": "user"|"assistant", "content": "..."}]
  - append(session_id, turn)
  - list_turns(session_id) → [ConversationTurn.to_dict(), ...]
  - reset(session_id)

세션마다 별도 리스트를 가지며, 세션 간 공유 상태는 없다.
FastAPI 스레드풀에서 동시에 호출되므로 dict 조작은 lock 안에서 한다.
"""

import threading
from typing import Dict, List

from app.core.orchestration.turn import ConversationTurn, TurnStatus


class InMemoryConversationStore:
    """
    세션별 ConversationTurn 인메모리 저장소.

    사용법 (manifest.py):
        "sessions": InMemoryConversationStore(max_turns=settings.MEMORY_MAX_RAW_TURNS)
    """

    def __init__(self, max_turns: int = 12):
        self._store: Dict[str, List[ConversationTurn]] = {}
        self._max = max_turns
        self._lock = threading.Lock()

    def append(self, session_id: str, turn: ConversationTurn) -> None:
        with self._lock:
            turns = self._store.setdefault(session_id, [])
            turns.append(turn)
            if len(turns) > self._max:
                # max_turns=0 → 기록하지 않음 (turns[-0:]는 전체 목록이다)
                self._store[session_id] = turns[-self._max:] if self._max > 0 else []

    def get_history(self, session_id: str, last_n_turns: int = 6) -> List[dict]:
        """
        최근 last_n_turns 턴을 user/assistant 메시지 쌍으로 반환한다.
        답변이 없는 턴(오류 등)은 제외한다.
        """
        with self._lock:
            turns = list(self._store.get(session_id, []))
        msgs = []
        for turn in turns[-last_n_turns:] if last_n_turns > 0 else []:
            if turn.status == TurnStatus.ERROR or not turn.answer:
                continue
            msgs.append({"role": "user", "content": turn.user_input})
            msgs.append({"role": "assistant", "content": turn.answer})
        return msgs

    def list_turns(self, session_id: str) -> List[dict]:
        with self._lock:
            turns = list(self._store.get(session_id, []))
        return [t.to_dict() for t in turns]

    def reset(self, session_id: str) -> None:
        with self._lock:
            self._store.pop(session_id, None)
