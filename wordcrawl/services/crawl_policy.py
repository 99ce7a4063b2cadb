import logging
import re
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterable, Optional, Sequence

from wordcrawl.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

NON_WORD_CHARACTERS = re.compile(r"\W")


def matches_any(value: str, patterns: Iterable[re.Pattern]) -> bool:
    """True if `value` fully matches one of `patterns` (not a substring search)."""
    return any(p.fullmatch(value) for p in patterns)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limit, deadline, ignored URLs and words.

    Holds only read-only state, so one policy is shared by every worker of a
    crawl without synchronisation.
    """

    def __init__(
        self,
        ignored_urls: Sequence[re.Pattern] = (),
        ignored_words: Sequence[re.Pattern] = (),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.ignored_urls = tuple(ignored_urls)
        self.ignored_words = tuple(ignored_words)
        self.clock = clock or utc_now

    def deadline_for(self, timeout: timedelta) -> datetime:
        return self.clock() + timeout

    def should_skip_due_to_depth(self, remaining_depth: int) -> bool:
        if remaining_depth <= 0:
            return True
        return False

    def should_skip_due_to_deadline(self, deadline: datetime) -> bool:
        if self.clock() > deadline:
            logger.debug("Skipping (deadline %s passed)", deadline)
            return True
        return False

    def should_skip_due_to_ignored_url(self, url: str) -> bool:
        if matches_any(url, self.ignored_urls):
            logger.debug("Skipping (ignored url) %s", url)
            return True
        return False

    def normalize_word(self, word: str) -> Optional[str]:
        """Strip non-word characters and lower-case `word`.

        Returns None when nothing is left or the result is an ignored word.
        """
        normalized = NON_WORD_CHARACTERS.sub("", word).lower()
        if not normalized:
            return None
        if matches_any(normalized, self.ignored_words):
            return None
        return normalized

    def count_words(self, words: Iterable[str]) -> Dict[str, int]:
        """Per-page occurrence counts of the words that survive normalisation."""
        counts: Dict[str, int] = {}
        for word in words:
            normalized = self.normalize_word(word)
            if normalized is None:
                continue
            counts[normalized] = counts.get(normalized, 0) + 1
        return counts
