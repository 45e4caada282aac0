"""Held-key tracking and heading derivation."""

from __future__ import annotations

from grid_snake.config import KeyBindings
from grid_snake.snake import Heading

# Browser-style key names mapped to the names used in bindings.
_KEY_ALIASES: dict[str, str] = {
    "arrowup": "up",
    "arrowdown": "down",
    "arrowleft": "left",
    "arrowright": "right",
    "esc": "escape",
}


def normalize_key(code: str) -> str:
    """Return the canonical lower-case name for a key identifier."""
    key = code.strip().lower()
    return _KEY_ALIASES.get(key, key)


class InputTracker:
    """Keys currently held down, in the order they were pressed."""

    def __init__(self, bindings: KeyBindings | None = None) -> None:
        self.bindings = bindings if bindings is not None else KeyBindings()
        self.keys: list[str] = []
        self._headings: dict[str, Heading] = {}
        for heading, codes in (
            (Heading.UP, self.bindings.up),
            (Heading.DOWN, self.bindings.down),
            (Heading.LEFT, self.bindings.left),
            (Heading.RIGHT, self.bindings.right),
        ):
            for code in codes:
                self._headings[normalize_key(code)] = heading
        self._quit_keys = frozenset(normalize_key(c) for c in self.bindings.quit)

    def key_down(self, code: str) -> None:
        key = normalize_key(code)
        if key not in self.keys:
            self.keys.append(key)

    def key_up(self, code: str) -> None:
        key = normalize_key(code)
        if key in self.keys:
            self.keys.remove(key)

    def key_typed(self, code: str) -> bool:
        """Return True when the quit key is typed or currently held."""
        if normalize_key(code) in self._quit_keys:
            return True
        return any(key in self._quit_keys for key in self.keys)

    def latest(self) -> str | None:
        """Return the most recently pressed key that is still held."""
        return self.keys[-1] if self.keys else None

    def requested_heading(self) -> Heading:
        """Map the latest held key to a heading, or NONE if it is not bound."""
        key = self.latest()
        if key is None:
            return Heading.NONE
        return self._headings.get(key, Heading.NONE)

    def derive_heading(self, current: Heading, length: int) -> Heading:
        """Return the heading to use given the keys currently held.

        A request for the exact opposite of *current* is refused while the
        snake is longer than one cell.
        """
        requested = self.requested_heading()
        if requested is Heading.NONE:
            return current
        if requested is current.opposite and length > 1:
            return current
        return requested

    def clear(self) -> None:
        self.keys.clear()
