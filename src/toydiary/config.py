"""Configuration management for Toy Diary."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.entries import DEFAULT_MOOD, Mood, parse_mood
from .store import STORAGE_KEY

logger = logging.getLogger(__name__)

DIARY_HOME = Path(os.environ.get("DIARY_HOME", Path.home() / "toydiary"))
CONFIG_FILE = DIARY_HOME / "config" / "diary.conf"
DATA_DIR = DIARY_HOME / "data"


@dataclass
class Config:
    """Toy Diary configuration."""

    data_dir: str = ""
    default_mood: Mood = DEFAULT_MOOD
    storage_key: str = STORAGE_KEY

    @property
    def data_path(self) -> Path:
        """Resolved data directory, falling back to DIARY_HOME/data."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from diary.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "default_mood":
                mood = parse_mood(value.lower())
                if mood is None:
                    logger.warning(f"Ignoring unknown DEFAULT_MOOD: {value}")
                else:
                    config.default_mood = mood
            case "storage_key":
                if value:
                    config.storage_key = value
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
