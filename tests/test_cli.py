from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

from pattern_catalog.__main__ import main


def test_list_shows_all_categories(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "chain_of_responsibility" in out
    assert "singleton" in out
    assert len(out.splitlines()) == 22


def test_run_echoes_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["run", "proxy"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "Connecting to open.com"


def test_run_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["run", "memento", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["scenario"] == "memento"
    assert payload["events"][1]["text"] == "Restored text: Initial text"


def test_run_unknown_scenario(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["run", "nope"]) == 2
    assert "Unknown scenario" in capsys.readouterr().err


def test_check_reports_pass_and_fail(artifact_dir: Path, scripts_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = artifact_dir / "bad.json"
    bad.write_text(json.dumps({"scenario": "bridge", "expect": [{"equals": "Radio turned on"}]}), encoding="utf-8")

    assert main(["check", str(scripts_dir / "command.json"), str(bad)]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "PASS command-undo"
    assert lines[1].startswith("FAIL bridge:")


def test_check_reports_unreadable_scripts_and_continues(
    artifact_dir: Path,
    scripts_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    malformed = artifact_dir / "malformed.json"
    malformed.write_text("{not json", encoding="utf-8")
    missing = artifact_dir / "missing.json"

    assert main(["check", str(malformed), str(missing), str(scripts_dir / "state.json")]) == 2
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith(f"FAIL {malformed}:") and "invalid JSON" in lines[0]
    assert lines[1].startswith(f"FAIL {missing}:")
    assert lines[2] == "PASS vending-machine"


def test_demo_module_runs_directly_without_warnings() -> None:
    completed = subprocess.run(
        [sys.executable, "-W", "error::RuntimeWarning", "-m", "pattern_catalog.behavioral.chain"],
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert completed.returncode == 0, completed.stderr
    assert completed.stdout.splitlines() == [
        "FirstHandler handled Request1",
        "SecondHandler handled Request2",
        "Request3 was not handled",
    ]
