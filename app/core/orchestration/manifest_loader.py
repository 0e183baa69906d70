# app/core/orchestration/manifest_loader.py
"""
프로젝트 manifest.py 작성 시 공통 유틸리티.

    from app.core.orchestration.manifest_loader import load_yaml, load_card

    data = load_yaml(PROJECT_ROOT)                        # project.yaml
    card = load_card(data["agents"]["classifier"]["card"], PROJECT_ROOT)
"""

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from app.core.errors import ConfigurationError


def load_card(rel_path: str, project_root: Path) -> Dict[str, Any]:
    """card.json 파일을 dict로 로드."""
    path = project_root / rel_path
    if not path.is_file():
        raise ConfigurationError(f"card not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_yaml(project_root: Path) -> Dict[str, Any]:
    """project.yaml 파일을 dict로 로드."""
    with open(project_root / "project.yaml", "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
