# app/cli.py
"""
터미널 대화 루프.

    python -m app.cli

한 줄 입력 = 한 턴. "q" 입력 또는 EOF로 종료한다.
"""

import json
import uuid

from app.core.config import settings
from app.projects.complaint.manifest import load_manifest

PROMPT = "User Input (exit: q) : "
EXIT_WORD = "q"


def conversation(orchestrator, session_id: str, read=input, write=print) -> None:
    """read()가 EXIT_WORD 또는 EOF를 반환할 때까지 턴을 반복한다."""
    while True:
        try:
            user_input = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            break
        if user_input.strip() == EXIT_WORD:
            break
        if not user_input.strip():
            continue

        payload = orchestrator.handle(session_id, user_input)
        write(json.dumps(payload, ensure_ascii=False, indent=2))


def main() -> None:
    manifest = load_manifest(settings)
    conversation(manifest["orchestrator"], session_id=f"cli-{uuid.uuid4().hex[:8]}")


if __name__ == "__main__":
    main()
