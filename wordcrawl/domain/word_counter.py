import threading
from typing import Dict, Mapping


class WordCounter:
    """Thread-safe running totals of normalised words for one crawl.

    Updates are plain integer additions done under a lock, so the final totals
    do not depend on how workers interleave. Iteration order of `snapshot` is
    the order in which words were first counted.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {}

    def merge(self, counts: Mapping[str, int]) -> None:
        """Add every (word, count) of `counts` in one critical section."""
        if not counts:
            return
        with self._lock:
            for word, count in counts.items():
                self._counts[word] = self._counts.get(word, 0) + count

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
