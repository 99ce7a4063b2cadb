import logging
from typing import Optional, Protocol

from wordcrawl.domain.parse_result import ParseResult
from wordcrawl.exceptions import HttpFetchError, UnsupportedUrlError
from wordcrawl.services.fetcher_factory import FetcherFactory
from wordcrawl.services.html_content_extractor import HtmlContentExtractor

logger = logging.getLogger(__name__)


class PageParser(Protocol):
    def parse(self, url: str) -> ParseResult: ...


def is_supported_content_type(content_type: Optional[str]) -> bool:
    """HTML, XML and any text/* body can be parsed; a missing type is accepted."""
    ct = (content_type or "").split(";", 1)[0].strip().lower()
    if ct == "":
        return True
    return (
        ct.startswith("text/")
        or ct in ("application/xhtml+xml", "application/xml")
        or ct.endswith("+xml")
    )


class HtmlPageParser:
    """Fetches a page (remote or local) and extracts its words and links.

    This is the boundary between the crawl engines and the outside world:
    `parse` never raises. Malformed URLs, unsupported schemes or content
    types, transport errors and unreadable files all produce
    `ParseResult.empty()`, and nothing records which of those happened.
    """

    def __init__(self, fetcher_factory: FetcherFactory, extractor: Optional[HtmlContentExtractor] = None):
        self.fetcher_factory = fetcher_factory
        self.extractor = extractor or HtmlContentExtractor()

    def parse(self, url: str) -> ParseResult:
        try:
            response = self.fetcher_factory.get(url).fetch(url)
        except UnsupportedUrlError as e:
            logger.debug("Skipping %s: %s", url, e)
            return ParseResult.empty()
        except HttpFetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            return ParseResult.empty()
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", url, e)
            return ParseResult.empty()
        except Exception:
            logger.exception("Fetch error for %s", url)
            return ParseResult.empty()

        if not is_supported_content_type(response.content_type):
            logger.info("Content type not supported %s. Skipping %s", response.content_type, url)
            return ParseResult.empty()

        try:
            sc = int(response.status_code)
        except (TypeError, ValueError):
            logger.warning("Unparseable status code for %s: %r", url, response.status_code)
            return ParseResult.empty()
        if sc < 200 or sc >= 300:
            logger.warning("Non-success status for %s: %s", url, response.status_code)
            return ParseResult.empty()

        try:
            words, links = self.extractor.extract(url, response.text)
        except Exception:
            logger.exception("Error extracting content from %s", url)
            return ParseResult.empty()

        logger.info("Parsed %s -> %d words, %d links", url, len(words), len(links))
        return ParseResult(words=tuple(words), links=tuple(links))
