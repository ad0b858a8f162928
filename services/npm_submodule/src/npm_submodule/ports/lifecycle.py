from collections.abc import Callable
from typing import Protocol

DONE_EVENT = "done"


class LifecycleHostPort(Protocol):
    def tap(self, event: str, callback: Callable[[], object]) -> None: ...
