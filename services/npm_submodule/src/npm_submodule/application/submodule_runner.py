from __future__ import annotations

import logging
from pathlib import Path

from npm_submodule.adapters.command_runner.subprocess_runner import SubprocessCommandRunner
from npm_submodule.adapters.filesystem.local import LocalFilesystem
from npm_submodule.domain.commands import INSTALL_COMMAND, classify_command
from npm_submodule.domain.diagnostics import CommandLocation, Diagnostic, Severity
from npm_submodule.domain.options import RunnerOptions
from npm_submodule.domain.result import CommandExecution, Result
from npm_submodule.ports.command_runner import CommandResult, CommandRunnerPort
from npm_submodule.ports.filesystem import FilesystemPort
from npm_submodule.ports.lifecycle import DONE_EVENT, LifecycleHostPort

logger = logging.getLogger(__name__)


def get_output(result: CommandResult) -> str | None:
    """Return stdout if present, else stderr, else None. Undecodable bytes are replaced."""
    if result.stdout:
        return result.stdout.decode("utf-8", errors="replace")
    if result.stderr:
        return result.stderr.decode("utf-8", errors="replace")
    return None


class NpmSubmoduleRunner:
    """Runs npm commands inside ``node_modules/<module>`` once the host build is done."""

    def __init__(
        self,
        options: RunnerOptions,
        command_runner: CommandRunnerPort | None = None,
        filesystem: FilesystemPort | None = None,
    ) -> None:
        self.options = options
        self.commands: list[str] = list(options.commands)
        self.command_runner = command_runner or SubprocessCommandRunner()
        self.filesystem = filesystem or LocalFilesystem()

    @property
    def target_path(self) -> Path:
        return self.options.target_path

    def apply(self, host: LifecycleHostPort) -> None:
        host.tap(DONE_EVENT, self.run_all)

    def handle_auto_install(self) -> bool:
        if not self.options.auto_install:
            return False
        if self.filesystem.exists(self.options.marker_path):
            return False
        logger.info(
            "%s is missing, running %s first", self.options.marker_path, INSTALL_COMMAND
        )
        self.commands.insert(0, INSTALL_COMMAND)
        return True

    def run_command(self, command: str) -> CommandExecution:
        args = classify_command(command)
        logger.debug("Classified %r as %s", command, args)
        result = self.command_runner.run(
            self.options.executable, args, self.options.target_path
        )
        output = get_output(result)
        if output is not None:
            self.options.logger(output)
        return CommandExecution(
            command=command,
            args=tuple(args),
            exit_code=result.exit_code,
            output=output,
        )

    def run_all(self) -> Result[list[CommandExecution]]:
        self.commands = list(self.options.commands)
        self.handle_auto_install()
        executions: list[CommandExecution] = []
        diagnostics: list[Diagnostic] = []
        for command in self.commands:
            execution = self.run_command(command)
            executions.append(execution)
            if not execution.succeeded:
                logger.warning(
                    "%s %s exited with %d",
                    self.options.executable,
                    " ".join(execution.args),
                    execution.exit_code,
                )
                diagnostics.append(
                    Diagnostic(
                        code="COMMAND_EXIT_NONZERO",
                        rule="command.exit_code",
                        severity=Severity.WARN,
                        message=f"Command exited with {execution.exit_code}: {command}",
                        location=CommandLocation(command, str(self.options.target_path)),
                        details={"args": list(execution.args), "exit_code": execution.exit_code},
                        is_execution=True,
                        upgradeable=True,
                    )
                )
        return Result(value=executions, diagnostics=diagnostics)
