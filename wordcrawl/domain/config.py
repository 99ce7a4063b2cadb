from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Tuple


@dataclass(frozen=True)
class CrawlerConfig:
    """Settings for one crawl run, as read from a config file.

    Patterns are compiled once by the parser and shared read-only by every
    worker of the crawl.
    """

    start_pages: Tuple[str, ...] = ()
    ignored_urls: Tuple[re.Pattern, ...] = ()
    ignored_words: Tuple[re.Pattern, ...] = ()
    max_depth: int = 0
    timeout: timedelta = timedelta(0)
    popular_word_count: int = 0
    parallelism: int = -1
    implementation_override: str = ""
    profile_output_path: str = ""
    result_path: str = ""
    config_path: str = field(default="", compare=False)

    def __post_init__(self):
        object.__setattr__(self, "start_pages", tuple(self.start_pages or ()))
        object.__setattr__(self, "ignored_urls", tuple(self.ignored_urls or ()))
        object.__setattr__(self, "ignored_words", tuple(self.ignored_words or ()))

    def __repr__(self):
        return (
            f"<CrawlerConfig path={self.config_path} start_pages={len(self.start_pages)} "
            f"max_depth={self.max_depth} timeout={self.timeout}>"
        )
