import logging
import os
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


class ConfigFileStore:
    """Filesystem/YAML IO for crawler config files.

    Responsibility: locate, read, and parse YAML (or JSON) files on disk.
    It does NOT validate what the files contain.
    """

    def __init__(self, *, configs_dir: Optional[str] = None):
        self.configs_dir = configs_dir or os.getcwd()

    def resolve_path(self, config_path: str) -> str:
        return config_path if os.path.isabs(config_path) else os.path.join(self.configs_dir, config_path)

    def exists(self, config_path: str) -> bool:
        return os.path.isfile(self.resolve_path(config_path))

    def load_yaml_dict(self, config_path: str) -> Optional[dict]:
        """Return parsed YAML dict for `config_path`, or None if missing/invalid."""
        full_path = self.resolve_path(config_path)
        if not os.path.isfile(full_path):
            return None
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not load config %s: %s", full_path, e)
            return None
        return data if isinstance(data, dict) else None
