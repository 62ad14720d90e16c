import logging
import os
from pathlib import Path

import yaml

TICK_DIR = Path(os.environ.get("TICK_HOME", Path.home() / ".tick")).expanduser()
CONFIG_PATH = TICK_DIR / "config.yaml"
DATA_PATH = TICK_DIR / "tasks.txt"
LOG_DIR = TICK_DIR

logger = logging.getLogger(__name__)


class Config:
    """Single-instance config manager. Load once, cache in memory."""

    _instance: "Config | None" = None
    _data: dict[str, object]

    def __new__(cls) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._data = {}
            cls._instance._load()
        return cls._instance

    def _load(self) -> None:
        """Load config from disk."""
        if not CONFIG_PATH.exists():
            self._data = {}
            return
        try:
            with CONFIG_PATH.open() as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.warning("could not read %s, using defaults", CONFIG_PATH, exc_info=True)
            loaded = None
        self._data = loaded if isinstance(loaded, dict) else {}

    def _save(self) -> None:
        """Persist config to disk."""
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with CONFIG_PATH.open("w") as f:
            yaml.dump(self._data, f, default_flow_style=False, allow_unicode=True)

    def get(self, key: str, default: object = None) -> object:
        """Get config value."""
        return self._data.get(key, default)

    def set(self, key: str, value: object) -> None:
        """Set config value and persist."""
        self._data[key] = value
        self._save()


_config = Config()


def get_data_path() -> Path:
    """Task file location: `data_path` from config, else ~/.tick/tasks.txt."""
    val = _config.get("data_path")
    if val:
        return Path(str(val)).expanduser()
    return DATA_PATH


def color_enabled() -> bool:
    val = _config.get("color", True)
    if isinstance(val, str):
        return val.strip().lower() not in ("0", "false", "no", "off")
    return bool(val)


def get_log_level() -> int:
    """Console log level name from config (default WARNING)."""
    name = str(_config.get("log_level", "WARNING")).strip().upper()
    return logging.getLevelNamesMapping().get(name, logging.WARNING)
