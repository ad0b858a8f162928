from pathlib import Path
import json as _json
import logging

import typer

from npm_submodule.adapters.command_runner.subprocess_runner import SubprocessCommandRunner
from npm_submodule.adapters.errors import AdapterError
from npm_submodule.adapters.filesystem.local import LocalFilesystem
from npm_submodule.adapters.lifecycle.hooks import HookRegistry
from npm_submodule.application.config_file import (
    DEFAULT_CONFIG_NAME,
    options_from_mapping,
    read_config_mapping,
)
from npm_submodule.application.result_serialization import serialize_result
from npm_submodule.application.submodule_runner import NpmSubmoduleRunner
from npm_submodule.domain.commands import classify_command
from npm_submodule.domain.diagnostics import Diagnostic, Severity, apply_strictness
from npm_submodule.domain.result import Result
from npm_submodule.ports.command_runner import CommandRunnerPort
from npm_submodule.ports.lifecycle import DONE_EVENT

app = typer.Typer(add_completion=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _command_runner() -> CommandRunnerPort:
    return SubprocessCommandRunner()


def _emit_diagnostics(result: Result, as_json: bool, args: list[str]) -> None:
    if as_json:
        typer.echo(_json.dumps(serialize_result(result, command="run", args=args)))
        return
    for d in result.diagnostics:
        typer.echo(f"{d.severity.value}: {d.code}: {d.message}", err=True)


def _stderr_logger(message: str) -> None:
    typer.echo(message, err=True)


@app.command()
def run(
    module: str | None = typer.Argument(None),
    command: list[str] = typer.Option(None, "--command", "-c"),
    auto_install: bool | None = typer.Option(None, "--auto-install/--no-auto-install"),
    config: Path | None = typer.Option(None, "--config"),
    executable: str | None = typer.Option(None, "--executable"),
    strict: bool = typer.Option(False, "--strict"),
    json: bool = False,
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Run npm commands inside node_modules/MODULE."""
    _configure_logging(verbose)
    args = [a for a in (module, *(command or [])) if a]
    raw: dict[str, object] = {}
    config_path = config or Path(DEFAULT_CONFIG_NAME)
    if config is not None or config_path.exists():
        loaded = read_config_mapping(config_path)
        if loaded.value is None:
            _emit_diagnostics(loaded, json, args)
            raise typer.Exit(loaded.exit_code)
        raw.update(loaded.value)
    if module:
        raw["module"] = module
    if command:
        raw["commands"] = list(command)
    if auto_install is not None:
        raw["auto_install"] = auto_install
        raw.pop("autoInstall", None)
        raw.pop("autoBootstrap", None)
    if executable:
        raw["executable"] = executable
    raw["logger"] = _stderr_logger if json else typer.echo

    options_result = options_from_mapping(raw, config_path if config_path.exists() else None)
    if options_result.value is None:
        _emit_diagnostics(options_result, json, args)
        raise typer.Exit(options_result.exit_code)

    runner = NpmSubmoduleRunner(
        options_result.value,
        command_runner=_command_runner(),
        filesystem=LocalFilesystem(),
    )
    host = HookRegistry()
    runner.apply(host)
    try:
        (result,) = host.emit(DONE_EVENT)
    except AdapterError as e:
        failure: Result[None] = Result(
            diagnostics=[
                Diagnostic(
                    code=type(e).__name__,
                    rule="command.spawn",
                    severity=Severity.ERROR,
                    message=e.message,
                    hint=e.hint,
                    details=e.details,
                    is_execution=True,
                )
            ]
        )
        _emit_diagnostics(failure, json, args)
        raise typer.Exit(failure.exit_code)

    result.diagnostics = apply_strictness(result.diagnostics, strict)
    _emit_diagnostics(result, json, args)
    raise typer.Exit(result.exit_code)


@app.command()
def classify(command: str):
    """Print the npm argument vector COMMAND would run with."""
    typer.echo(_json.dumps(classify_command(command)))
