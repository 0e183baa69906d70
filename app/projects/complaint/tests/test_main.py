# app/projects/complaint/tests/test_main.py
"""python -m app.main 진입점."""

import runpy
from unittest.mock import patch

from app.core.config import Settings, settings
from app.projects.complaint.manifest import load_manifest
from app.projects.complaint.tests.mock_http import fake_session
from app.projects.complaint.tests.mock_llm import ScriptedLLM, text_response


def test_main_serves_on_configured_host_and_port():
    manifest = load_manifest(Settings(OPENAI_API_KEY=""), llm=ScriptedLLM(text_response("ok")), session=fake_session())
    with patch("app.projects.complaint.manifest.load_manifest", return_value=manifest), \
            patch.object(settings, "BACKEND_HOST", "127.0.0.1"), \
            patch.object(settings, "BACKEND_PORT", 9123), \
            patch("uvicorn.run") as run:
        runpy.run_module("app.main", run_name="__main__")

    app, = run.call_args.args
    assert run.call_args.kwargs == {"host": "127.0.0.1", "port": 9123}
    paths = {route.path for route in app.routes}
    assert {"/v1/agent/chat", "/text/transform", "/classify"} <= paths
