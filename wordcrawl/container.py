"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.crawl_orchestrator import CrawlOrchestrator
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser
from wordcrawl.services.fetcher import HttpServiceFetcher, LocalFileFetcher
from wordcrawl.services.fetcher_factory import FetcherFactory
from wordcrawl.services.html_content_extractor import HtmlContentExtractor
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.page_parser import HtmlPageParser
from wordcrawl.services.profiler import Profiler
from wordcrawl.utils.datetime_utils import utc_now


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# USER_AGENT (str, default: "wordcrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for a single outbound HTTP request. The crawl deadline does not
#   interrupt requests in flight, so this bounds how far a crawl can overrun.
#
# WORDCRAWL_LOG_LEVEL (str, default: "INFO")
#   Root log level configured by run.py.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "wordcrawl/0.1"),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
    "WORDCRAWL_LOG_LEVEL": env.log_level(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for wordcrawl."""

    # Configuration
    config = providers.Configuration(default=ENV)

    clock = providers.Object(utc_now)

    # Config files
    config_file_store = providers.Factory(
        ConfigFileStore,
    )

    crawler_config_parser = providers.Singleton(
        CrawlerConfigParser
    )

    # Page fetching and parsing - Singleton instances
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int)
    )

    http_fetcher = providers.Singleton(
        HttpServiceFetcher,
        http_service=http_service,
    )

    file_fetcher = providers.Singleton(
        LocalFileFetcher
    )

    fetcher_factory = providers.Singleton(
        FetcherFactory,
        http_fetcher=http_fetcher,
        file_fetcher=file_fetcher,
    )

    content_extractor = providers.Singleton(
        HtmlContentExtractor
    )

    page_parser = providers.Singleton(
        HtmlPageParser,
        fetcher_factory=fetcher_factory,
        extractor=content_extractor,
    )

    # One profiler per run so the report covers exactly that run
    profiler = providers.Singleton(
        Profiler,
        clock=clock,
    )

    crawl_orchestrator = providers.Factory(
        CrawlOrchestrator,
        page_parser=page_parser,
        profiler=profiler,
        clock=clock,
    )
