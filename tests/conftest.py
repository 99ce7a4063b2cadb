import threading
from datetime import datetime, timedelta, timezone

import pytest

from wordcrawl.domain.parse_result import ParseResult


class FakeClock:
    """Clock returning a fixed instant that only moves when told to."""

    def __init__(self, start=None, step=timedelta(0)):
        self._now = start or datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
        self._step = step
        self._lock = threading.Lock()

    def __call__(self) -> datetime:
        with self._lock:
            now = self._now
            self._now = self._now + self._step
            return now

    def advance(self, delta: timedelta) -> None:
        with self._lock:
            self._now = self._now + delta


class FakePageParser:
    """In-memory page graph: url -> (text, links). Unknown URLs parse as empty pages.

    Records every parsed URL so tests can check for duplicate fetches.
    """

    def __init__(self, pages=None, failing=(), on_parse=None):
        self.pages = dict(pages or {})
        self.failing = set(failing)
        self.on_parse = on_parse
        self.parsed = []
        self._lock = threading.Lock()

    def parse(self, url: str) -> ParseResult:
        with self._lock:
            self.parsed.append(url)
        if self.on_parse is not None:
            self.on_parse(url)
        if url in self.failing or url not in self.pages:
            return ParseResult.empty()
        text, links = self.pages[url]
        return ParseResult(words=tuple(text.split()), links=tuple(links))


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def page_graph():
    """A -> B, C; B -> D; C -> A, D; D -> E (E has no links)."""
    return {
        "http://site/a": ("Hello world! alpha", ["http://site/b", "http://site/c"]),
        "http://site/b": ("hello Beta beta", ["http://site/d"]),
        "http://site/c": ("gamma, World", ["http://site/a", "http://site/d"]),
        "http://site/d": ("delta the the", ["http://site/e"]),
        "http://site/e": ("epsilon", []),
    }


@pytest.fixture
def make_parser():
    def _make(pages=None, failing=(), on_parse=None):
        return FakePageParser(pages, failing=failing, on_parse=on_parse)
    return _make


@pytest.fixture
def make_clock():
    return FakeClock
