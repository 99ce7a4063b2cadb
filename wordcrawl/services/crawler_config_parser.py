import os
import re
from datetime import timedelta
from typing import Any, List

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.exceptions import ConfigValidationError


class CrawlerConfigParser:
    """Parse a YAML dict into a CrawlerConfig.

    Responsibility: schema/conversion for config files (regex compilation,
    numeric fields, defaults). It does NOT perform filesystem IO. Range checks
    on the values belong to `CrawlOrchestrator.validate`.
    """

    def parse(self, *, data: dict, config_path: str = "") -> CrawlerConfig:
        if not isinstance(data, dict):
            raise ConfigValidationError("<root>", "config must be a mapping")

        return CrawlerConfig(
            start_pages=self._string_list(data, "start_pages"),
            ignored_urls=self._patterns(data, "ignored_urls"),
            ignored_words=self._patterns(data, "ignored_words"),
            max_depth=self._int(data, "max_depth", 0),
            timeout=timedelta(seconds=self._float(data, "timeout_seconds", 0.0)),
            popular_word_count=self._int(data, "popular_word_count", 0),
            parallelism=self._int(data, "parallelism", -1),
            implementation_override=str(data.get("implementation_override") or "").strip(),
            profile_output_path=str(data.get("profile_output_path") or ""),
            result_path=str(data.get("result_path") or ""),
            config_path=os.path.basename(config_path) if config_path else "",
        )

    def _string_list(self, data: dict, key: str) -> List[str]:
        raw = data.get(key)
        if raw is None:
            return []
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list):
            raise ConfigValidationError(key, "expected a list of strings")
        return [str(item) for item in raw]

    def _patterns(self, data: dict, key: str) -> List[re.Pattern]:
        patterns = []
        for raw in self._string_list(data, key):
            try:
                patterns.append(re.compile(raw))
            except re.error as e:
                raise ConfigValidationError(key, f"invalid pattern {raw!r}: {e}") from e
        return patterns

    def _int(self, data: dict, key: str, default: int) -> int:
        raw: Any = data.get(key)
        if raw is None:
            return default
        if isinstance(raw, bool):
            raise ConfigValidationError(key, f"expected an integer, got {raw!r}")
        try:
            return int(raw)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(key, f"expected an integer, got {raw!r}") from e

    def _float(self, data: dict, key: str, default: float) -> float:
        raw: Any = data.get(key)
        if raw is None:
            return default
        if isinstance(raw, bool):
            raise ConfigValidationError(key, f"expected a number, got {raw!r}")
        try:
            return float(raw)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(key, f"expected a number, got {raw!r}") from e
