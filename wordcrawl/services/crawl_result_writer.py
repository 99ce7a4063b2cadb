import json
import logging
from typing import TextIO

from wordcrawl.domain.crawl_result import CrawlResult

logger = logging.getLogger(__name__)


class CrawlResultWriter:
    """Writes a `CrawlResult` as pretty-printed JSON.

    Field names are ``wordCounts`` (rank order kept) and ``urlsVisited``.
    """

    def __init__(self, result: CrawlResult):
        self.result = result

    def to_dict(self) -> dict:
        return {
            "wordCounts": dict(self.result.word_counts),
            "urlsVisited": self.result.urls_visited,
        }

    def write(self, stream: TextIO) -> None:
        json.dump(self.to_dict(), stream, indent=2, ensure_ascii=False)
        stream.write("\n")

    def write_to_path(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            self.write(f)
        logger.info("Crawl result written to %s", path)
