from pathlib import Path
from typing import Protocol


class FilesystemPort(Protocol):
    def exists(self, path: Path) -> bool: ...
