from dataclasses import dataclass
from typing import Any


@dataclass
class AdapterError(Exception):
    message: str
    details: dict[str, Any] | None = None
    hint: str | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


class CommandNotFound(AdapterError):
    pass


class CommandSpawnError(AdapterError):
    pass


class FilesystemCheckError(AdapterError):
    pass
