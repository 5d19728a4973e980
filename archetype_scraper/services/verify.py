from __future__ import annotations

from pathlib import Path

from archetype_scraper.config import ScrapeConfig
from archetype_scraper.constants import SET_CODE_RE
from archetype_scraper.paths import is_writable_dir


def validate_set_code(set_code: str) -> list[str]:
    if not set_code or not set_code.strip():
        return ["set code is empty"]
    # the code is used as a directory and file name
    if not SET_CODE_RE.fullmatch(set_code):
        return [f"set code may only contain letters, digits, '-' and '_': {set_code!r}"]
    return []


def inspect_output_root(output_root: Path) -> list[str]:
    if not is_writable_dir(output_root):
        return [f"output folder is not writable: {output_root}"]
    return []


def run_startup_checks(config: ScrapeConfig) -> list[str]:
    issues: list[str] = []
    issues.extend(validate_set_code(config.set_code))
    issues.extend(inspect_output_root(config.output_root))
    return issues
