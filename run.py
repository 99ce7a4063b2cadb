import argparse
import logging
import sys
from typing import Optional, Sequence

from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s",
    )
    # Third-party libraries stay quiet unless something goes wrong
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Crawl start pages and report the most popular words.",
    )
    parser.add_argument("config", help="Path to a YAML or JSON crawler config file")
    parser.add_argument("--log-level", default=None, help="Log level (default: WORDCRAWL_LOG_LEVEL or INFO)")
    return parser


def load_config(container: Container, config_path: str):
    store = container.config_file_store()
    if not store.exists(config_path):
        raise ConfigNotFoundError(config_path)
    data = store.load_yaml_dict(config_path)
    if data is None:
        raise ConfigNotFoundError(config_path, "could not be parsed as a mapping")
    return container.crawler_config_parser().parse(data=data, config_path=config_path)


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    container = container or Container()
    setup_logging(args.log_level or container.config.WORDCRAWL_LOG_LEVEL() or "INFO")

    try:
        config = load_config(container, args.config)
        container.crawl_orchestrator().run(config)
    except (ConfigNotFoundError, ConfigValidationError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
