"""Custom exceptions for wordcrawl services."""


class ConfigNotFoundError(Exception):
    """Raised when a crawler config file cannot be found or read."""

    def __init__(self, config_path: str, reason: str = "not found"):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Config '{config_path}' {reason}")


class ConfigValidationError(ValueError):
    """Raised when a crawler config holds a value the crawl cannot run with."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid config field '{field}': {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class UnsupportedUrlError(Exception):
    """Raised when no fetcher handles the scheme of a URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Unsupported URL: {url!r}")


class NotProfiledError(TypeError):
    """Raised when wrapping an object whose type has no profiled methods."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"{type_name} doesn't have profiled methods.")
