import threading


class VisitedTracker:
    """
    Tracks which URLs have been visited during a single crawl.

    Shared by every worker of a crawl, so `claim` is the only way to mark a
    URL: the membership test and the insert happen under one lock, and exactly
    one caller wins for any given URL. There is no eviction; a URL that has
    been claimed stays claimed until the tracker is discarded with its crawl.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: set[str] = set()

    def claim(self, url: str) -> bool:
        """Mark `url` as visited. Returns False if it was already visited."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
