from __future__ import annotations

import logging
import os
from pathlib import Path
import shutil
import subprocess

from npm_submodule.adapters.errors import CommandNotFound, CommandSpawnError
from npm_submodule.ports.command_runner import CommandResult

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Run a program to completion with stdin closed and both streams captured."""

    def _resolve(self, program: str) -> str:
        # npm ships as npm.cmd on Windows; which() honours PATHEXT.
        # Relative PATH hits are anchored here, before cwd changes.
        resolved = shutil.which(program)
        if resolved is None:
            raise CommandNotFound(
                f"Executable not found: {program}",
                details={"program": program},
                hint=f"Install {program} or make sure it is on PATH",
            )
        return os.path.abspath(resolved)

    def run(self, program: str, args: list[str], cwd: Path) -> CommandResult:
        executable = self._resolve(program)
        logger.debug("Spawning %s %s in %s", executable, args, cwd)
        try:
            completed = subprocess.run(
                [executable, *args],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=cwd,
                check=False,
            )
        except OSError as e:
            raise CommandSpawnError(
                f"Failed to start {program}: {e}",
                details={"program": program, "args": list(args), "cwd": str(cwd)},
                cause=e,
            ) from e
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or b"",
            stderr=completed.stderr or b"",
        )
