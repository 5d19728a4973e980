# archetype_scraper/services/images.py
import os
import time
from pathlib import Path
from typing import Iterable

import requests

from archetype_scraper.common import log, log_error, normalize_ws
from archetype_scraper.config import ScrapeConfig
from archetype_scraper.constants import NO_IMAGE_TITLE, SAFE_LABEL_RE
from archetype_scraper.paths import image_rel_path, images_dir
from archetype_scraper.services.fetch import FetchError, fetch_json


def sanitize_label(label: str) -> str:
    safe = SAFE_LABEL_RE.sub("_", label)
    return safe or "unknown"


def image_filename(label: str) -> str:
    return f"{sanitize_label(label)}.jpg"


def lookup_image_url(session: requests.Session, label: str, config: ScrapeConfig) -> str:
    """Return the card's normal-size image URL, or "" when Scryfall has no match."""
    params = {"fuzzy": normalize_ws(label)}
    try:
        card = fetch_json(session, config.lookup_url, params=params, timeout=config.timeout)
    except FetchError as ex:
        if ex.status_code == 404:
            return ""
        raise
    image_uris = card.get("image_uris") or {}
    if not isinstance(image_uris, dict):
        return ""
    return str(image_uris.get("normal") or "")


def download_image(session: requests.Session, url: str, dest: Path, timeout: float = 30) -> None:
    if not url:
        raise ValueError("empty image url")
    dest.parent.mkdir(parents=True, exist_ok=True)

    tmp = dest.with_suffix(dest.suffix + ".tmp")
    try:
        with session.get(url, timeout=timeout, stream=True) as r:
            r.raise_for_status()
            # temp file then replace, so a failed stream never leaves a partial jpg
            with open(tmp, "wb") as f:
                for chunk in r.iter_content(chunk_size=1024 * 256):
                    if chunk:
                        f.write(chunk)
        os.replace(tmp, dest)
    finally:
        if tmp.exists():
            tmp.unlink()


def resolve_images(
    labels: Iterable[str],
    config: ScrapeConfig,
    session: requests.Session,
) -> dict[str, str]:
    """
    Look up and download one image per label, strictly in order.
    Failures are logged per label; the returned map only holds labels
    whose image was saved.
    """
    image_paths: dict[str, str] = {}
    saved_by: dict[str, str] = {}
    target_dir = images_dir(config.output_root, config.set_code)
    target_dir.mkdir(parents=True, exist_ok=True)

    for label in dict.fromkeys(labels):
        if not label.strip() or label == NO_IMAGE_TITLE:
            log(f"[SKIP] no image label for archetype ({label or 'empty'})")
            continue

        if config.delay:
            time.sleep(config.delay)

        try:
            image_url = lookup_image_url(session, label, config)
            if not image_url:
                log(f"[WARN] no image found for: {label}")
                continue
            log(f"[DEBUG] {label} -> {image_url}", config.verbose)
            filename = image_filename(label)
            if filename in saved_by:
                log(f"[WARN] \"{label}\" and \"{saved_by[filename]}\" share {filename}; overwriting")
            download_image(session, image_url, target_dir / filename, timeout=config.timeout)
        except Exception as ex:
            log_error(f"[ERROR] image for \"{label}\" failed: {ex}")
            continue

        saved_by[filename] = label
        image_paths[label] = image_rel_path(config.set_code, filename)
        log(f"[INFO] downloaded image for: {label}")

    return image_paths
