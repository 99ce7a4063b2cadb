from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CrawlTask:
    """One step of the traversal: visit `url` with `remaining_depth` hops left.

    Tasks are never reused; following a link creates a new task via `child`.
    """

    url: str
    remaining_depth: int
    deadline: datetime

    def child(self, link: str) -> "CrawlTask":
        return CrawlTask(url=link, remaining_depth=self.remaining_depth - 1, deadline=self.deadline)
