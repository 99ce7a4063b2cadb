import functools
import logging
import re
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.crawl_task import CrawlTask
from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_counter import WordCounter
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.fork_join_pool import ForkJoinPool, available_parallelism, effective_parallelism
from wordcrawl.services.page_parser import PageParser
from wordcrawl.services.profiler import profiled
from wordcrawl.services.word_ranker import rank_word_counts

logger = logging.getLogger(__name__)


class ParallelWebCrawler:
    """Crawls with a pool of worker threads, fetching several pages at once.

    Every page is a task that forks one child task per outbound link and joins
    all of them before it completes, so no task outlives its parent and no
    work is left behind once `crawl` returns. The visited set and the word
    totals are the only state the workers share; both update atomically, which
    keeps the visited URLs and word totals equal to those of
    `SequentialWebCrawler` whenever the deadline lets both finish.
    """

    def __init__(
        self,
        *,
        page_parser: PageParser,
        timeout: timedelta,
        max_depth: int,
        popular_word_count: int,
        parallelism: int = -1,
        ignored_urls: Sequence[re.Pattern] = (),
        ignored_words: Sequence[re.Pattern] = (),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.page_parser = page_parser
        self.timeout = timeout
        self.max_depth = max_depth
        self.popular_word_count = popular_word_count
        self.parallelism = effective_parallelism(parallelism)
        self.crawl_policy = CrawlPolicy(ignored_urls, ignored_words, clock)

    @property
    def max_parallelism(self) -> int:
        return available_parallelism()

    @profiled
    def crawl(self, start_pages: Sequence[str]) -> CrawlResult:
        deadline = self.crawl_policy.deadline_for(self.timeout)
        visited = VisitedTracker()
        counts = WordCounter()

        logger.info("Parallel crawl of %d start pages with %d workers", len(start_pages), self.parallelism)
        with ForkJoinPool(self.parallelism) as pool:
            pool.invoke_all([
                functools.partial(self.crawl_from, CrawlTask(url, self.max_depth, deadline), pool, visited, counts)
                for url in start_pages
            ])

        logger.info("Parallel crawl finished: %d urls visited, %d distinct words", len(visited), len(counts))
        return CrawlResult(
            word_counts=rank_word_counts(counts.snapshot(), self.popular_word_count),
            urls_visited=len(visited),
        )

    def crawl_from(self, task: CrawlTask, pool: ForkJoinPool, visited: VisitedTracker, counts: WordCounter) -> bool:
        """Process one page and its subtree. Returns True if this task parsed the page."""
        if self.crawl_policy.should_skip_due_to_depth(task.remaining_depth):
            return False
        if self.crawl_policy.should_skip_due_to_deadline(task.deadline):
            return False
        if self.crawl_policy.should_skip_due_to_ignored_url(task.url):
            return False
        # Only the worker that claims the URL goes on to parse it.
        if not visited.claim(task.url):
            logger.debug("Skipping (visited) %s", task.url)
            return False

        try:
            result = self.page_parser.parse(task.url)
        except Exception:
            # The URL stays claimed; only this page and its subtree are lost.
            logger.warning("Parse failed for %s", task.url, exc_info=True)
            return False
        counts.merge(self.crawl_policy.count_words(result.words))

        pool.invoke_all([
            functools.partial(self.crawl_from, task.child(link), pool, visited, counts)
            for link in result.links
        ])
        return True
