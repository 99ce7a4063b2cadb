"""Domain objects for wordcrawl - explicit re-exports to satisfy linters."""
from .config import CrawlerConfig as CrawlerConfig
from .crawl_result import CrawlResult as CrawlResult
from .crawl_task import CrawlTask as CrawlTask
from .parse_result import ParseResult as ParseResult
from .visited_tracker import VisitedTracker as VisitedTracker
from .word_counter import WordCounter as WordCounter

__all__ = ["CrawlerConfig", "CrawlResult", "CrawlTask", "ParseResult", "VisitedTracker", "WordCounter"]
