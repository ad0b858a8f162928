from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, TypeVar

from npm_submodule.domain.diagnostics import Diagnostic
from npm_submodule.domain.result import CommandExecution, Result

T = TypeVar("T")


def serialize_diagnostic(diag: Diagnostic) -> dict[str, Any]:
    return {
        "id": diag.id,
        "code": diag.code,
        "rule": diag.rule,
        "severity": diag.severity.value,
        "message": diag.message,
        "hint": diag.hint,
        "details": diag.details,
        "is_execution": diag.is_execution,
        "location": asdict(diag.location) if diag.location is not None else None,
    }


def serialize_execution(execution: CommandExecution) -> dict[str, Any]:
    return {
        "command": execution.command,
        "args": list(execution.args),
        "exit_code": execution.exit_code,
        "output": execution.output,
    }


def serialize_result(result: Result[T], command: str, args: list[str]) -> dict[str, Any]:
    executions: list[dict[str, Any]] = []
    if isinstance(result.value, list):
        executions = [
            serialize_execution(item)
            for item in result.value
            if isinstance(item, CommandExecution)
        ]
    return {
        "result_schema_version": 1,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "args": args,
        "exit_code": result.exit_code,
        "executions": executions,
        "diagnostics": [serialize_diagnostic(d) for d in result.diagnostics],
        "artifacts": result.artifacts,
    }
