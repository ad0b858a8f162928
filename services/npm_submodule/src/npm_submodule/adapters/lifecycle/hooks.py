from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
import logging

logger = logging.getLogger(__name__)


class HookRegistry:
    """Minimal in-process lifecycle host.

    Callbacks tapped on an event run synchronously, in registration order,
    when the event is emitted.
    """

    def __init__(self) -> None:
        self._callbacks: dict[str, list[Callable[[], object]]] = defaultdict(list)

    def tap(self, event: str, callback: Callable[[], object]) -> None:
        self._callbacks[event].append(callback)

    def emit(self, event: str) -> list[object]:
        callbacks = list(self._callbacks.get(event, ()))
        logger.debug("Emitting %s to %d callback(s)", event, len(callbacks))
        return [callback() for callback in callbacks]
