from pathlib import Path
import os

from npm_submodule.adapters.errors import FilesystemCheckError


class LocalFilesystem:
    def _stat(self, path: Path) -> os.stat_result:
        return os.stat(path)

    def exists(self, path: Path) -> bool:
        try:
            self._stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            raise FilesystemCheckError(
                f"Cannot check {path}: {e.strerror or e}",
                details={"path": str(path)},
                cause=e,
            ) from e
        return True
