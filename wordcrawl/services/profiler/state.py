from __future__ import annotations

import threading
from datetime import timedelta
from typing import Dict, TextIO

from wordcrawl.utils.datetime_utils import format_duration


class ProfilingState:
    """Thread-safe accumulator of call durations per ``Type#method`` key."""

    def __init__(self):
        self._lock = threading.Lock()
        self._data: Dict[str, timedelta] = {}

    @staticmethod
    def key_for(type_name: str, method_name: str) -> str:
        return f"{type_name}#{method_name}"

    def record(self, type_name: str, method_name: str, duration: timedelta) -> None:
        if duration < timedelta(0):
            raise ValueError("negative durations are not allowed")
        key = self.key_for(type_name, method_name)
        with self._lock:
            self._data[key] = self._data.get(key, timedelta(0)) + duration

    def write(self, stream: TextIO) -> None:
        """Write one ``Type#method took Xm Ys Zms`` line per key, sorted by key."""
        with self._lock:
            items = sorted(self._data.items())
        for key, duration in items:
            stream.write(f"{key} took {format_duration(duration)}\n")
