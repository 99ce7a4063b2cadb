"""Protocol (interface) definitions for services."""

from typing import Protocol, Sequence

from wordcrawl.domain.crawl_result import CrawlResult


class WebCrawler(Protocol):
    """What the orchestrator needs from a crawl engine.

    Both engines implement it, and so does a `ProfilingWrapper` around either
    of them.
    """

    def crawl(self, start_pages: Sequence[str]) -> CrawlResult:
        """Crawl from `start_pages` and return the ranked words and visit count."""
        ...

    @property
    def max_parallelism(self) -> int:
        """Upper bound on the number of pages this engine processes at once."""
        ...
