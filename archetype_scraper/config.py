"""Run configuration for one scrape of an archetype page."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_BASE_URL = "https://www.willclark.uk"
SCRYFALL_NAMED_URL = "https://api.scryfall.com/cards/named"
# Scryfall asks for 50-100ms between requests.
SCRYFALL_REQUEST_DELAY = 0.1


def _default_output_root() -> Path:
    env_root = os.environ.get("ARCHETYPES_OUTPUT_ROOT")
    if env_root:
        return Path(env_root).expanduser()
    return Path.cwd()


def _default_base_url() -> str:
    return os.environ.get("ARCHETYPES_BASE_URL") or DEFAULT_BASE_URL


@dataclass
class ScrapeConfig:
    """Settings for a single set; passed explicitly to every stage."""

    set_code: str
    output_root: Path = field(default_factory=_default_output_root)
    base_url: str = field(default_factory=_default_base_url)
    lookup_url: str = SCRYFALL_NAMED_URL
    timeout: float = 30.0
    delay: float = SCRYFALL_REQUEST_DELAY
    retries: int = 0
    download_images: bool = True
    verbose: bool = False


def source_url(config: ScrapeConfig) -> str:
    return f"{config.base_url.rstrip('/')}/{config.set_code}-archetypes.html"
