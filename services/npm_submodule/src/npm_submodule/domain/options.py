from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

DEPENDENCY_ROOT = "node_modules"
MARKER_DIR = "node_modules"
DEFAULT_EXECUTABLE = "npm"

Logger = Callable[[str], None]

_AUTO_INSTALL_KEYS = ("auto_install", "autoInstall", "autoBootstrap")


class OptionsError(ValueError):
    pass


@dataclass(frozen=True)
class RunnerOptions:
    """Settings for one submodule runner.

    ``module`` names the installed dependency; every command runs inside
    ``node_modules/<module>``. ``logger`` receives the captured output of
    each command.
    """

    module: str
    commands: tuple[str, ...] = ()
    auto_install: bool = False
    logger: Logger = print
    executable: str = DEFAULT_EXECUTABLE

    def __post_init__(self) -> None:
        if not isinstance(self.module, str):
            raise OptionsError(f"module must be a string, got {type(self.module).__name__}")
        if isinstance(self.commands, str) or not isinstance(self.commands, Sequence):
            raise OptionsError("commands must be a list of strings")
        for command in self.commands:
            if not isinstance(command, str):
                raise OptionsError(f"command must be a string: {command!r}")
        if not callable(self.logger):
            raise OptionsError("logger must be callable")
        if not isinstance(self.executable, str) or not self.executable:
            raise OptionsError("executable must be a non-empty string")
        object.__setattr__(self, "commands", tuple(self.commands))
        object.__setattr__(self, "auto_install", bool(self.auto_install))

    @property
    def target_path(self) -> Path:
        return Path(DEPENDENCY_ROOT) / self.module

    @property
    def marker_path(self) -> Path:
        return self.target_path / MARKER_DIR

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> RunnerOptions:
        """Build options from a loose plugin-style mapping.

        Missing or falsy values fall back to the defaults.
        """
        if "module" not in raw:
            raise OptionsError("module is required")
        auto_install = next((raw[key] for key in _AUTO_INSTALL_KEYS if raw.get(key)), False)
        commands = raw.get("commands") or ()
        if isinstance(commands, str) or not isinstance(commands, Sequence):
            raise OptionsError("commands must be a list of strings")
        logger = raw.get("logger") or print
        executable = raw.get("executable") or DEFAULT_EXECUTABLE
        return cls(
            module=raw["module"],  # type: ignore[arg-type]
            commands=tuple(commands),
            auto_install=bool(auto_install),
            logger=logger,  # type: ignore[arg-type]
            executable=executable,  # type: ignore[arg-type]
        )
