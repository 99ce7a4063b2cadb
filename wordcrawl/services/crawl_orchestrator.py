import logging
import sys
from datetime import datetime, timedelta
from typing import Callable, Optional, TextIO

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.exceptions import ConfigValidationError
from wordcrawl.services.crawl_result_writer import CrawlResultWriter
from wordcrawl.services.page_parser import PageParser
from wordcrawl.services.parallel_crawler import ParallelWebCrawler
from wordcrawl.services.profiler import Profiler
from wordcrawl.services.protocols import WebCrawler
from wordcrawl.services.sequential_crawler import SequentialWebCrawler

logger = logging.getLogger(__name__)

SEQUENTIAL = "sequential"
PARALLEL = "parallel"

_IMPLEMENTATIONS = {
    "": PARALLEL,
    "parallel": PARALLEL,
    "parallelwebcrawler": PARALLEL,
    "sequential": SEQUENTIAL,
    "sequentialwebcrawler": SEQUENTIAL,
}


class CrawlOrchestrator:
    """Validates a `CrawlerConfig`, picks a crawl engine and runs it.

    Engine failures are not retried: per-page errors never leave the engines,
    so anything that does propagates to the caller.
    """

    def __init__(
        self,
        *,
        page_parser: PageParser,
        profiler: Profiler,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.page_parser = page_parser
        self.profiler = profiler
        self.clock = clock

    @staticmethod
    def validate(config: CrawlerConfig) -> None:
        if config is None:
            raise ConfigValidationError("<root>", "config is required")
        if config.max_depth < 0:
            raise ConfigValidationError("max_depth", f"must be >= 0, got {config.max_depth}")
        if config.timeout <= timedelta(0):
            raise ConfigValidationError("timeout_seconds", f"must be > 0, got {config.timeout.total_seconds()}")
        if config.popular_word_count < 0:
            raise ConfigValidationError("popular_word_count", f"must be >= 0, got {config.popular_word_count}")
        resolve_implementation(config.implementation_override)

    def build_crawler(self, config: CrawlerConfig) -> WebCrawler:
        """Create the configured engine, wrapped by the profiler."""
        settings = dict(
            page_parser=self.page_parser,
            timeout=config.timeout,
            max_depth=config.max_depth,
            popular_word_count=config.popular_word_count,
            ignored_urls=config.ignored_urls,
            ignored_words=config.ignored_words,
            clock=self.clock,
        )
        if resolve_implementation(config.implementation_override) == SEQUENTIAL:
            crawler = SequentialWebCrawler(**settings)
        else:
            crawler = ParallelWebCrawler(parallelism=config.parallelism, **settings)
        return self.profiler.wrap(crawler)

    def crawl(self, config: CrawlerConfig) -> CrawlResult:
        self.validate(config)
        crawler = self.build_crawler(config)
        logger.info(
            "Starting crawl of %d start pages (max_depth=%s, timeout=%s, engine=%s)",
            len(config.start_pages),
            config.max_depth,
            config.timeout,
            type(crawler.delegate).__name__,
        )
        result = crawler.crawl(list(config.start_pages))
        logger.info("Crawl finished: %d urls visited", result.urls_visited)
        return result

    def run(self, config: CrawlerConfig, stdout: Optional[TextIO] = None) -> CrawlResult:
        """Crawl, then write the result and the profile report.

        Empty output paths in `config` send the corresponding output to `stdout`.
        """
        stdout = stdout or sys.stdout
        result = self.crawl(config)

        writer = CrawlResultWriter(result)
        if config.result_path:
            writer.write_to_path(config.result_path)
        else:
            writer.write(stdout)

        if config.profile_output_path:
            self.profiler.write_data_to_path(config.profile_output_path)
        else:
            self.profiler.write_data(stdout)
        return result


def resolve_implementation(override: Optional[str]) -> str:
    """Map an `implementation_override` value to SEQUENTIAL or PARALLEL."""
    key = (override or "").strip().lower()
    # Accept dotted class paths such as "wordcrawl.services.sequential_crawler.SequentialWebCrawler".
    key = key.rsplit(".", 1)[-1]
    try:
        return _IMPLEMENTATIONS[key]
    except KeyError:
        raise ConfigValidationError("implementation_override", f"unknown crawler implementation {override!r}") from None
