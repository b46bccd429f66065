"""Key-token to action dispatch table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyAction = Callable[[], bool]


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to one action.

    Actions return ``True`` when the browser should quit.
    """

    keys: tuple[str, ...]
    action: KeyAction


class KeyMap:
    def __init__(self, *bindings: KeyBinding) -> None:
        self._actions: dict[str, KeyAction] = {}
        for binding in bindings:
            for key in binding.keys:
                self._actions[key] = binding.action

    def dispatch(self, key: str) -> bool:
        """Run the action bound to ``key``; unbound keys are a no-op."""
        action = self._actions.get(key)
        if action is None:
            return False
        return action()
