"""In-memory on-screen activity log."""

from __future__ import annotations

import threading
from collections import deque


class ActivityLog:
    """Bounded, append-only text log; lost on restart."""

    def __init__(self, max_entries: int = 500) -> None:
        self._entries: deque[str] = deque(maxlen=max_entries)
        self._lock = threading.Lock()
        self._written = 0

    def append(self, entry: str) -> None:
        with self._lock:
            self._entries.append(entry)
            self._written += 1

    def reset(self, entry: str = "") -> None:
        """Clear the log, optionally starting it with *entry*."""
        with self._lock:
            self._entries.clear()
            if entry:
                self._entries.append(entry)
                self._written += 1

    @property
    def written(self) -> int:
        """Entries written since creation, including evicted ones."""
        with self._lock:
            return self._written

    def since(self, written: int) -> list[str]:
        """Entries written after the log had seen *written* entries."""
        with self._lock:
            missing = min(self._written - written, len(self._entries))
            if missing <= 0:
                return []
            return list(self._entries)[-missing:]

    @property
    def entries(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    @property
    def text(self) -> str:
        with self._lock:
            return "".join(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
