"""Small synchronisation primitives: an atomic flag and a wait group with timeout."""

from __future__ import annotations

import threading


class AtomicBool:
    """A boolean whose reads and writes are thread safe."""

    __slots__ = ("_lock", "_value")

    def __init__(self, value: bool = False) -> None:
        self._lock = threading.Lock()
        self._value = bool(value)

    @property
    def value(self) -> bool:
        with self._lock:
            return self._value

    @value.setter
    def value(self, value: bool) -> None:
        with self._lock:
            self._value = bool(value)

    def __bool__(self) -> bool:
        return self.value

    def __repr__(self) -> str:
        return f"AtomicBool({self.value})"


class WaitGroup:
    """Counter that lets threads wait until it drops to zero."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._count = 0

    def add(self, delta: int = 1) -> None:
        """Add ``delta`` (which may be negative) to the counter."""
        with self._cond:
            count = self._count + delta
            if count < 0:
                raise ValueError("negative WaitGroup counter")
            self._count = count
            if count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        """Decrement the counter by one."""
        self.add(-1)

    def wait(self) -> None:
        """Block until the counter is zero."""
        with self._cond:
            self._cond.wait_for(lambda: self._count == 0)

    def wait_with_timeout(self, timeout: float) -> bool:
        """Block until the counter is zero or ``timeout`` seconds pass; True if it timed out."""
        with self._cond:
            return not self._cond.wait_for(lambda: self._count == 0, timeout)