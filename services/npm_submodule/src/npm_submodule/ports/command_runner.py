from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass
class CommandResult:
    exit_code: int
    stdout: bytes
    stderr: bytes


class CommandRunnerPort(Protocol):
    def run(self, program: str, args: list[str], cwd: Path) -> CommandResult: ...
