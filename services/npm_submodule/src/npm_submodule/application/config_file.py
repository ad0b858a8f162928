from __future__ import annotations

from pathlib import Path

import yaml

from npm_submodule.domain.diagnostics import Diagnostic, FileLocation, Severity
from npm_submodule.domain.options import OptionsError, RunnerOptions
from npm_submodule.domain.result import Result

DEFAULT_CONFIG_NAME = "npm-submodule.yaml"


def read_config_mapping(path: Path) -> Result[dict[str, object]]:
    if not path.exists():
        return Result(
            diagnostics=[
                Diagnostic(
                    code="CONFIG_MISSING",
                    rule="config.exists",
                    severity=Severity.ERROR,
                    message=f"{path.name} not found",
                    location=FileLocation(str(path)),
                )
            ]
        )
    try:
        raw: object = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="CONFIG_PARSE_FAILED",
                    rule="config.parse",
                    severity=Severity.ERROR,
                    message=str(e),
                    location=FileLocation(str(path)),
                )
            ]
        )
    if not isinstance(raw, dict):
        return Result(
            diagnostics=[
                Diagnostic(
                    code="CONFIG_INVALID",
                    rule="config.shape",
                    severity=Severity.ERROR,
                    message="Config must be a mapping",
                    location=FileLocation(str(path)),
                )
            ]
        )
    return Result(value={str(k): v for k, v in raw.items()})


def options_from_mapping(raw: dict[str, object], path: Path | None = None) -> Result[RunnerOptions]:
    try:
        return Result(value=RunnerOptions.from_mapping(raw))
    except OptionsError as e:
        return Result(
            diagnostics=[
                Diagnostic(
                    code="CONFIG_INVALID",
                    rule="config.options",
                    severity=Severity.ERROR,
                    message=str(e),
                    location=FileLocation(str(path)) if path else None,
                )
            ]
        )


def read_config(path: Path) -> Result[RunnerOptions]:
    mapping = read_config_mapping(path)
    if mapping.value is None:
        return Result(diagnostics=mapping.diagnostics)
    return options_from_mapping(mapping.value, path)
