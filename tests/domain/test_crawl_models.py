from datetime import datetime, timezone

import pytest

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.crawl_task import CrawlTask
from wordcrawl.domain.parse_result import ParseResult

DEADLINE = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


def test_child_task_has_one_less_hop_and_same_deadline():
    task = CrawlTask("http://site/a", 3, DEADLINE)
    child = task.child("http://site/b")

    assert child == CrawlTask("http://site/b", 2, DEADLINE)
    assert task.remaining_depth == 3


def test_crawl_result_counts_are_read_only():
    counts = {"hello": 2}
    result = CrawlResult(word_counts=counts, urls_visited=1)
    counts["hello"] = 50

    assert result.word_counts["hello"] == 2
    with pytest.raises(TypeError):
        result.word_counts["hello"] = 3


def test_crawl_result_keeps_rank_order():
    result = CrawlResult(word_counts={"b": 3, "a": 2, "c": 1}, urls_visited=2)
    assert list(result.word_counts) == ["b", "a", "c"]


def test_empty_results():
    assert dict(CrawlResult.empty().word_counts) == {}
    assert CrawlResult.empty().urls_visited == 0
    assert ParseResult.empty() == ParseResult(words=(), links=())
