from __future__ import annotations

from pathlib import Path

import pytest

from pattern_catalog import ExecutionOrchestrator, discover

SCRIPTS_DIR = Path(__file__).parent / "scripts"


@pytest.fixture()
def artifact_dir(tmp_path: Path) -> Path:
    path = tmp_path / "artifacts"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture()
def orchestrator() -> ExecutionOrchestrator:
    return ExecutionOrchestrator(registry=discover())


@pytest.fixture()
def scripts_dir() -> Path:
    return SCRIPTS_DIR
