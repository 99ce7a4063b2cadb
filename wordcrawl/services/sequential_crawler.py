import logging
import re
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.crawl_task import CrawlTask
from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_counter import WordCounter
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.page_parser import PageParser
from wordcrawl.services.profiler import profiled
from wordcrawl.services.word_ranker import rank_word_counts

logger = logging.getLogger(__name__)


class SequentialWebCrawler:
    """Downloads and processes one page at a time, depth-first, seeds in order.

    For a fixed set of pages the result is fully deterministic, which makes
    this engine the reference the parallel one is checked against.
    """

    def __init__(
        self,
        *,
        page_parser: PageParser,
        timeout: timedelta,
        max_depth: int,
        popular_word_count: int,
        ignored_urls: Sequence[re.Pattern] = (),
        ignored_words: Sequence[re.Pattern] = (),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.page_parser = page_parser
        self.timeout = timeout
        self.max_depth = max_depth
        self.popular_word_count = popular_word_count
        self.crawl_policy = CrawlPolicy(ignored_urls, ignored_words, clock)

    @property
    def max_parallelism(self) -> int:
        return 1

    @profiled
    def crawl(self, start_pages: Sequence[str]) -> CrawlResult:
        deadline = self.crawl_policy.deadline_for(self.timeout)
        visited = VisitedTracker()
        counts = WordCounter()

        for url in start_pages:
            self.crawl_from(CrawlTask(url, self.max_depth, deadline), visited, counts)

        logger.info("Sequential crawl finished: %d urls visited, %d distinct words", len(visited), len(counts))
        return CrawlResult(
            word_counts=rank_word_counts(counts.snapshot(), self.popular_word_count),
            urls_visited=len(visited),
        )

    def crawl_from(self, task: CrawlTask, visited: VisitedTracker, counts: WordCounter) -> None:
        if self.crawl_policy.should_skip_due_to_depth(task.remaining_depth):
            return
        if self.crawl_policy.should_skip_due_to_deadline(task.deadline):
            return
        if self.crawl_policy.should_skip_due_to_ignored_url(task.url):
            return
        if not visited.claim(task.url):
            logger.debug("Skipping (visited) %s", task.url)
            return

        try:
            result = self.page_parser.parse(task.url)
        except Exception:
            # The URL stays claimed; only this page and its subtree are lost.
            logger.warning("Parse failed for %s", task.url, exc_info=True)
            return
        counts.merge(self.crawl_policy.count_words(result.words))

        for link in result.links:
            self.crawl_from(task.child(link), visited, counts)
