"""Page parse result data model."""
from typing import NamedTuple, Tuple


class ParseResult(NamedTuple):
    """Raw words and absolute outbound links found on one page.

    Words are returned as they appear in the page text; normalisation and
    ignored-word filtering belong to the crawl engines.
    """
    words: Tuple[str, ...] = ()
    links: Tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "ParseResult":
        return cls()
