"""Command-line entry point: ``python -m pattern_catalog``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import jsonschema

from .errors import ExpectationError, ScriptLoadError, UnknownScenario
from .orchestrator import ExecutionOrchestrator
from .script import RunConfig

logger = logging.getLogger("pattern_catalog")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pattern_catalog", description="Run design pattern demos.")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list registered scenarios")

    run_p = sub.add_parser("run", help="run one scenario")
    run_p.add_argument("name")
    run_p.add_argument("--json", action="store_true", help="print the transcript as JSON")

    check_p = sub.add_parser("check", help="verify scenarios against expectation scripts")
    check_p.add_argument("scripts", nargs="+", type=Path)
    return parser


def _cmd_list(orchestrator: ExecutionOrchestrator) -> int:
    for item in orchestrator.registry:
        print(f"{item.category:<12} {item.name:<24} {item.title}")
    return 0


def _cmd_run(orchestrator: ExecutionOrchestrator, name: str, as_json: bool) -> int:
    config = RunConfig(echo=not as_json, stream=sys.stdout)
    result = orchestrator.execute(name, config=config)
    if as_json:
        print(result.transcript.to_json())
    return 0


def _cmd_check(orchestrator: ExecutionOrchestrator, scripts: Sequence[Path]) -> int:
    status = 0
    for path in scripts:
        try:
            result = orchestrator.check(path)
        except ExpectationError as exc:
            print(f"FAIL {exc.scenario}: {'; '.join(exc.failures)}")
            status = max(status, 1)
            continue
        except (jsonschema.ValidationError, ScriptLoadError, UnknownScenario) as exc:
            message = exc.message if isinstance(exc, jsonschema.ValidationError) else str(exc)
            print(f"FAIL {path}: {message}")
            status = 2
            continue
        print(f"PASS {result.script.label}")
    return status


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    orchestrator = ExecutionOrchestrator()
    logger.debug("Dispatching command %s", args.command)

    if args.command == "list":
        return _cmd_list(orchestrator)
    if args.command == "run":
        try:
            return _cmd_run(orchestrator, args.name, args.json)
        except UnknownScenario as exc:
            print(exc, file=sys.stderr)
            return 2
    if args.command == "check":
        return _cmd_check(orchestrator, args.scripts)
    msg = f"Unsupported command: {args.command}"  # pragma: no cover - argparse guards this
    raise ValueError(msg)


if __name__ == "__main__":
    sys.exit(main())
