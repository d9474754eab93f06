"""Configuration management for MoodJo."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MOODJO_HOME = Path(os.environ.get("MOODJO_HOME", Path.home() / "moodjo"))
CONFIG_FILE = MOODJO_HOME / "config" / "moodjo.conf"
DATA_DIR = MOODJO_HOME / "data"


@dataclass
class Config:
    """MoodJo configuration."""

    entries_dir: str = ""
    media_dir: str = ""
    max_images: int = 5
    date_format: str = "%A, %b %d"

    @property
    def entries_path(self) -> Path:
        if self.entries_dir:
            return Path(self.entries_dir).expanduser()
        return DATA_DIR / "entries"

    @property
    def media_path(self) -> Path:
        if self.media_dir:
            return Path(self.media_dir).expanduser()
        return DATA_DIR / "media"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from moodjo.conf (KEY=value lines)."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "entries_dir":
                config.entries_dir = value
            case "media_dir":
                config.media_dir = value
            case "max_images":
                try:
                    config.max_images = int(value)
                except ValueError:
                    logger.warning(f"Ignoring invalid MAX_IMAGES: {value!r}")
            case "date_format":
                config.date_format = value

    return config
