"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from curated_gems.core.i18n import DEFAULT_LANGUAGE, coerce_language


@dataclass
class DatasetConfig:
    """Dataset location settings."""
    url: Optional[str] = None
    file: Optional[Path] = Path("data.json")
    timeout: float = 30.0
    cache_bust: bool = True


@dataclass
class DisplayConfig:
    """Display settings."""
    language: str = DEFAULT_LANGUAGE
    format: str = "markdown"


@dataclass
class Settings:
    """Application settings."""

    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @property
    def data_url(self) -> Optional[str]:
        return self.dataset.url

    @property
    def data_file(self) -> Optional[Path]:
        return self.dataset.file

    @property
    def request_timeout(self) -> float:
        return self.dataset.timeout

    @property
    def language(self) -> str:
        return coerce_language(self.display.language)

    @property
    def output_format(self) -> str:
        return self.display.format


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings()

    if "dataset" in config:
        for key, value in config["dataset"].items():
            if key == "file" and value is not None:
                value = Path(value)
            setattr(settings.dataset, key, value)

    if "display" in config:
        for key, value in config["display"].items():
            setattr(settings.display, key, value)

    # Environment overrides YAML
    data_url = os.getenv("CURATED_GEMS_DATA_URL")
    if data_url:
        settings.dataset.url = data_url

    data_file = os.getenv("CURATED_GEMS_DATA_FILE")
    if data_file:
        settings.dataset.file = Path(data_file)

    language = os.getenv("CURATED_GEMS_LANG")
    if language:
        settings.display.language = language

    return settings
