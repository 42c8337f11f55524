"""Singleton pattern - one shared, lazily created instance per process.

``acquire()`` is the only way to obtain the shared state. The first call
creates it under a lock, every later call returns that same object, so a
value set through one reference is visible through all of them.
"""
import threading
from typing import List, Optional

from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton, reset_singleton


class SharedState:
    """Process-wide holder for a single value."""

    def __init__(self) -> None:
        self._value: Optional[str] = None
        self._lock = threading.Lock()

    def get(self) -> Optional[str]:
        return self._value

    def set(self, value: str) -> None:
        with self._lock:
            self._value = value


def acquire() -> SharedState:
    """Get the shared state, creating it on first use."""
    return get_singleton(SharedState)


def reset() -> None:
    """Drop the shared state; the next ``acquire()`` starts from scratch."""
    reset_singleton(SharedState)


def demonstrate() -> List[str]:
    first = acquire()
    first.set("Shared value")
    second = acquire()
    return [
        f"Same instance: {first is second}",
        f"Value seen through second reference: {second.get()}",
    ]
