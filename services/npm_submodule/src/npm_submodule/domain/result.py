from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from npm_submodule.domain.diagnostics import Diagnostic, Severity

T = TypeVar("T")


@dataclass(frozen=True)
class CommandExecution:
    command: str
    args: tuple[str, ...]
    exit_code: int
    output: str | None

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass
class Result(Generic[T]):
    value: T | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    artifacts: list[dict[str, Any]] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        errors = [d for d in self.diagnostics if d.severity == Severity.ERROR]
        if any(d.is_execution for d in errors):
            return 3
        if errors:
            return 2
        return 0
