"""An action that cycles through a list of labels each time it fires."""

from __future__ import annotations

from typing import Any, Callable


class ActionCycle:
    """Cycles through registered texts and icons, notifying listeners."""

    def __init__(self) -> None:
        self._texts: list[str] = []
        self._icons: list[Any] = []
        self._index = 0
        self._callbacks: list[Callable[[int], Any]] = []
        self.text = ""
        self.icon: Any = None

    def __len__(self) -> int:
        return len(self._texts)

    @property
    def index(self) -> int:
        return self._index

    def add_action(self, text: str, icon: Any = None) -> None:
        """Append an entry to the cycle."""
        self._texts.append(text)
        self._icons.append(icon)

    def set_index(self, index: int) -> None:
        """Select an entry; indices outside the cycle are ignored."""
        if not 0 <= index < len(self._texts):
            return
        self._index = index
        self._update()

    def reset(self) -> None:
        """Return to the first entry."""
        self.set_index(0)

    def connect(self, callback: Callable[[int], Any]) -> None:
        """Register a callback receiving the index of each trigger."""
        self._callbacks.append(callback)

    def trigger(self) -> int | None:
        """Fire the current entry and move on to the next one.

        Returns the fired index, or None when the cycle is empty.
        """
        if not self._texts:
            return None
        fired = self._index
        for callback in self._callbacks:
            callback(fired)
        self._index = (self._index + 1) % len(self._texts)
        self._update()
        return fired

    def _update(self) -> None:
        self.text = self._texts[self._index]
        self.icon = self._icons[self._index]