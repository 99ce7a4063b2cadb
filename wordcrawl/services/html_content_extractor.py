import logging
from typing import Callable, List, Optional, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Contents of these tags are code or styling, not page text.
NON_TEXT_TAGS = ("script", "style")


class HtmlContentExtractor:
    """Pulls raw words and absolute links out of an HTML document."""

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract(self, base_url: str, body: Optional[str]) -> Tuple[List[str], List[str]]:
        """Return ``(words, links)`` for `body`.

        Words are the whitespace-separated tokens of the visible text, not yet
        normalised. Links are every ``<a href>`` resolved against `base_url`,
        in document order.
        """
        if not body:
            return [], []

        soup = self._soup_factory(body)
        links = self._extract_links(base_url, soup)

        for tag in NON_TEXT_TAGS:
            for element in soup.find_all(tag):
                element.decompose()
        words = soup.get_text(separator=" ").split()
        return words, links

    def _extract_links(self, base_url: str, soup: BeautifulSoup) -> List[str]:
        links = []
        for a in soup.find_all("a", href=True):
            href = (a.get("href") or "").strip()
            if not href:
                continue
            links.append(urljoin(base_url, href))
        return links
