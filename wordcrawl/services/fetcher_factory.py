from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse

from wordcrawl.exceptions import UnsupportedUrlError
from wordcrawl.services.fetcher import Fetcher


@dataclass(frozen=True)
class FetcherFactory:
    http_fetcher: Fetcher
    file_fetcher: Fetcher

    def get(self, url: str) -> Fetcher:
        """Pick the fetcher for the scheme of `url`."""
        if url is None or (isinstance(url, str) and url.strip() == ""):
            raise UnsupportedUrlError(url)
        scheme = urlparse(url.strip()).scheme.lower()
        if scheme in ("http", "https"):
            return self.http_fetcher
        if scheme == "file":
            return self.file_fetcher
        raise UnsupportedUrlError(url)
