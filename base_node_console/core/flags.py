"""Atomic Flags: the only mutable state shared between console threads.

Invariants:
    - load/store/toggle are atomic and totally ordered across all threads
    - A flag is owned by whoever created it; the console only holds references

Design Decisions:
    - threading.Lock over a bare bool attribute: toggle is a read-modify-write,
      and the lock also orders stores with loads from other threads
"""

import threading


class AtomicFlag:
    """A boolean shared between the input thread and detached work."""

    def __init__(self, initial: bool = False):
        self._value = bool(initial)
        self._lock = threading.Lock()

    def load(self) -> bool:
        with self._lock:
            return self._value

    def store(self, value: bool) -> None:
        with self._lock:
            self._value = bool(value)

    def toggle(self) -> bool:
        """Flip the flag in place. Returns the new value."""
        with self._lock:
            self._value = not self._value
            return self._value

    def __bool__(self) -> bool:
        return self.load()

    def __repr__(self) -> str:
        return f"AtomicFlag({self.load()})"
