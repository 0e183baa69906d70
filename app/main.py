# app/main.py
from fastapi import FastAPI

from app.core.api import create_agent_router
from app.core.config import settings
from app.projects.complaint.api import create_complaint_router
from app.projects.complaint.manifest import load_manifest

# 프로세스 시작 시 한 번 조립. 자격 증명 누락·tool 중복은 여기서 실패한다.
manifest = load_manifest(settings)
orchestrator = manifest["orchestrator"]

app = FastAPI(title=settings.APP_NAME)
app.include_router(create_agent_router(orchestrator))
app.include_router(create_complaint_router(orchestrator))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.BACKEND_HOST, port=settings.BACKEND_PORT)
