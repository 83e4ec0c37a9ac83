"""Registry of post-write side effects keyed by setting name."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping, Optional

SettingHandler = Callable[[Any], None]


class HandlerRegistry:
    """Fixed mapping of setting key to a one-argument callback.

    Built once at startup and injected into the store. At most one handler
    exists per key.
    """

    def __init__(self, handlers: Optional[Mapping[str, SettingHandler]] = None) -> None:
        self._handlers: dict[str, SettingHandler] = {}
        for key, handler in (handlers or {}).items():
            self.register(key, handler)

    def register(self, key: str, handler: SettingHandler) -> None:
        """Attach *handler* to *key*.

        Raises:
            ValueError: A handler is already registered for *key*.
        """
        if not callable(handler):
            raise TypeError(f"Handler for {key!r} is not callable")
        if key in self._handlers:
            raise ValueError(f"A handler is already registered for {key!r}")
        self._handlers[key] = handler

    def get(self, key: str) -> Optional[SettingHandler]:
        """Return the handler for *key*, or None."""
        return self._handlers.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)
