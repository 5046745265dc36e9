"""Hook - ordered listener registry for a single timer event."""
from __future__ import annotations

from tick_timer.types import Listener


class Hook:
    """Fires zero-argument listeners synchronously, in registration order.

    Dispatch walks a copy of the listener list, so a listener that
    subscribes or unsubscribes while the hook is firing only affects the
    next ``fire``. Listener exceptions propagate to whoever fired the hook.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def fire(self) -> None:
        for listener in list(self._listeners):
            listener()

    def clear(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners

    def __repr__(self) -> str:
        return f"Hook({self.name!r}, listeners={len(self._listeners)})"
