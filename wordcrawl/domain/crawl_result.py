"""Crawl result data model."""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class CrawlResult:
    """Result of a crawl operation.

    `word_counts` holds the most popular words in rank order (most frequent
    first) and is read-only once the result is built.
    """

    word_counts: Mapping[str, int] = field(default_factory=dict)
    """Popular words mapped to their totals, in rank order"""

    urls_visited: int = 0
    """Number of distinct URLs claimed during the crawl, failed fetches included"""

    def __post_init__(self):
        object.__setattr__(self, "word_counts", MappingProxyType(dict(self.word_counts)))

    @classmethod
    def empty(cls) -> "CrawlResult":
        return cls(word_counts={}, urls_visited=0)
