# app/projects/complaint/manifest.py
"""
project.yaml 로드 → card.json 로드 → tool·에이전트·레지스트리·오케스트레이터 조립.
manifest는 조립만 하고 로직은 없다. 프로세스 시작 시 한 번 호출한다.

대화 간에 공유되는 것은 동결된 레지스트리와 상태 없는 LLM 클라이언트뿐이다.
다운스트림 HTTP 호출은 기본적으로 Session을 공유하지 않는다 (app/core/http.py).

반환 dict:
    {
        "settings":     Settings,
        "llm":          BaseLLMClient,
        "registry":     ToolRegistry (동결됨),
        "sessions":     InMemoryConversationStore,
        "orchestrator": AgentOrchestrator,
    }
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional

import requests

from app.core.config import Settings
from app.core.errors import ConfigurationError
from app.core.llm import BaseLLMClient, create_llm_client
from app.core.orchestration import AgentOrchestrator, load_card, load_yaml
from app.core.state import InMemoryConversationStore
from app.core.tools import BaseTool, build_registry
from app.projects.complaint.agents import DepartmentClassifierAgent
from app.projects.complaint.agents.complaint_agent.prompt import get_system_prompt
from app.projects.complaint.tools import ClassifierTool, KobartTool, OcrTool

PROJECT_ROOT = Path(__file__).resolve().parent


def _tool_factories(
    settings: Settings,
    llm: BaseLLMClient,
    session: Optional[requests.Session],
    classifier_card: Dict[str, Any],
) -> Dict[str, Callable[[], BaseTool]]:
    """tool 이름 → 생성 함수. project.yaml "tools" 목록의 이름만 생성된다."""
    http = dict(
        session=session,
        timeout=settings.HTTP_TIMEOUT_SEC,
        max_retry=settings.HTTP_MAX_RETRY,
        backoff_sec=settings.HTTP_BACKOFF_SEC,
    )
    return {
        KobartTool.name: lambda: KobartTool(settings.KOBART_SERVICE_URL, **http),
        OcrTool.name: lambda: OcrTool(settings.OCR_SERVICE_URL, **http),
        ClassifierTool.name: lambda: ClassifierTool(
            DepartmentClassifierAgent(llm=llm, llm_config=classifier_card.get("llm")),
        ),
    }


def load_manifest(
    settings: Settings,
    *,
    llm: Optional[BaseLLMClient] = None,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    Args:
        settings: 프로세스 설정
        llm:      주입할 LLM 클라이언트. None이면 OpenAI 클라이언트 생성 (자격 증명 필수)
        session:  다운스트림 HTTP 세션 (테스트용). None이면 tool 호출마다 requests.post()로 새 연결을 열어
                  요청 간 공유 Session 없이 동작한다

    Raises:
        ConfigurationError: 자격 증명 누락, 알 수 없는/중복된 tool 이름
    """
    data = load_yaml(PROJECT_ROOT)
    agents = data.get("agents", {})
    orchestrator_card = load_card(agents["orchestrator"]["card"], PROJECT_ROOT)
    classifier_card = load_card(agents["classifier"]["card"], PROJECT_ROOT)

    llm = llm or create_llm_client(settings)

    factories = _tool_factories(settings, llm, session, classifier_card)
    tools = []
    for name in data.get("tools", []):
        factory = factories.get(name)
        if factory is None:
            raise ConfigurationError(f"Unknown tool in project.yaml: '{name}'")
        tools.append(factory())
    registry = build_registry(tools)

    sessions = InMemoryConversationStore(max_turns=settings.MEMORY_MAX_RAW_TURNS)
    policy = orchestrator_card.get("policy", {})
    orchestrator = AgentOrchestrator(
        llm=llm,
        registry=registry,
        sessions=sessions,
        system_prompt=get_system_prompt(),
        llm_config=orchestrator_card.get("llm"),
        max_tool_hops=settings.AGENT_MAX_TOOL_HOPS,
        history_turns=policy.get("history_turns", 6),
    )

    return {
        "settings": settings,
        "llm": llm,
        "registry": registry,
        "sessions": sessions,
        "orchestrator": orchestrator,
    }
