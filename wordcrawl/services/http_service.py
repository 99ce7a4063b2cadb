import requests
from typing import Callable

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError

# Pages whose words and links can be extracted, HTML preferred.
ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9,text/*;q=0.8,*/*;q=0.1"


class HttpService:
    """
    HTTP client for fetching crawl pages as text.

    Requires http_client callable for dependency injection, so tests can
    substitute a fake client and the HTTP library stays swappable.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch `url` and return its status code, decoded body and Content-Type.

        A text response that does not declare a charset is decoded with the
        encoding detected from its body rather than requests' ISO-8859-1
        default, so non-Latin words survive into the counts.
        """
        headers = {"User-Agent": self.user_agent, "Accept": ACCEPT_HEADER}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # Let real exceptions from the response object bubble up.
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        if isinstance(ct, str) and 'charset' not in ct.lower():
            detected = getattr(resp, 'apparent_encoding', None)
            if detected:
                resp.encoding = detected

        return HttpResponse(resp.status_code, resp.text, ct)
