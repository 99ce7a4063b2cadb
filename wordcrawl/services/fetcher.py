from __future__ import annotations

from pathlib import Path
from typing import Protocol
from urllib.parse import urlparse
from urllib.request import url2pathname

from wordcrawl.domain.http_response import HttpResponse


class Fetcher(Protocol):
    """Fetch a URL and return a normalized HTTP-like response.

    Kept small so remote and local pages share one parsing path.
    """

    def fetch(self, url: str) -> HttpResponse: ...


class HttpServiceFetcher:
    def __init__(self, http_service):
        self._http_service = http_service

    def fetch(self, url: str) -> HttpResponse:
        return self._http_service.fetch(url)


class LocalFileFetcher:
    """Reads ``file://`` URLs from disk.

    Missing or unreadable files raise `OSError`; the page parser turns that
    into an empty page.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def fetch(self, url: str) -> HttpResponse:
        parsed = urlparse(url)
        path = Path(url2pathname(parsed.path))
        text = path.read_text(encoding=self._encoding)
        return HttpResponse(status_code=200, text=text, content_type=_guess_content_type(path))


def _guess_content_type(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in (".html", ".htm", ""):
        return "text/html"
    if suffix in (".xhtml",):
        return "application/xhtml+xml"
    if suffix in (".xml",):
        return "application/xml"
    if suffix in (".txt",):
        return "text/plain"
    return "application/octet-stream"
