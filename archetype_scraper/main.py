import argparse
import os
import sys
from pathlib import Path

import requests

from archetype_scraper.common import log, log_error
from archetype_scraper.config import SCRYFALL_REQUEST_DELAY, ScrapeConfig, source_url
from archetype_scraper.paths import page_path
from archetype_scraper.services.extract import extract_archetypes
from archetype_scraper.services.fetch import FetchError, build_session, fetch_text
from archetype_scraper.services.images import resolve_images
from archetype_scraper.services.render import render_page
from archetype_scraper.services.verify import run_startup_checks

USAGE_HINT = "Please provide the set code, e.g. 'archetype-scraper mh3'."


def save_page(content: str, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    tmp = dest.with_suffix(dest.suffix + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp, dest)
    finally:
        if tmp.exists():
            tmp.unlink()


def run(config: ScrapeConfig, session: requests.Session | None = None) -> int:
    """
    Fetch, extract, resolve images, render and save one set's page.
    Returns 0 on success, 1 when the page fetch, parse or save fails.
    """
    session = session or build_session(config.retries)
    url = source_url(config)

    log(f"[INFO] fetching {url}")
    try:
        html = fetch_text(session, url, timeout=config.timeout)
    except FetchError as ex:
        log_error(f"[ERROR] could not fetch archetype page: {ex}")
        return 1

    try:
        records = extract_archetypes(html)
    except Exception as ex:
        log_error(f"[ERROR] could not parse archetype page {url}: {ex}")
        return 1
    log(f"[INFO] archetypes={len(records)}")

    image_paths: dict[str, str] = {}
    if config.download_images:
        image_paths = resolve_images([r.image_label for r in records], config, session)
        log(f"[INFO] images={len(image_paths)}/{len(records)}")

    dest = page_path(config.output_root, config.set_code)
    try:
        save_page(render_page(records, image_paths), dest)
    except OSError as ex:
        log_error(f"[ERROR] could not save {dest}: {ex}")
        return 1

    log(f"[DONE] page written: {dest}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="archetype-scraper",
        description="Build a static archetype page for one card set.",
    )
    ap.add_argument("set_code", nargs="?", help="Set code, e.g. mh3")
    ap.add_argument("--out-dir", default=None, help="Root folder for images/ and sets/ (default: cwd)")
    ap.add_argument("--base-url", default=None, help="Site hosting <set>-archetypes.html")
    ap.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout seconds")
    ap.add_argument("--delay", type=float, default=SCRYFALL_REQUEST_DELAY, help="Delay seconds before each card lookup")
    ap.add_argument("--retries", type=int, default=0, help="Retries for transient HTTP errors (default: 0)")
    ap.add_argument("--no-images", action="store_true", help="Skip card image lookup and download")
    ap.add_argument("--verbose", action="store_true")
    return ap


def config_from_args(args: argparse.Namespace) -> ScrapeConfig:
    config = ScrapeConfig(
        set_code=args.set_code,
        timeout=args.timeout,
        delay=args.delay,
        retries=args.retries,
        download_images=not args.no_images,
        verbose=args.verbose,
    )
    if args.out_dir:
        config.output_root = Path(args.out_dir).expanduser()
    if args.base_url:
        config.base_url = args.base_url
    return config


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if not args.set_code:
        ap.print_usage(sys.stderr)
        log_error(USAGE_HINT)
        return 1

    config = config_from_args(args)
    issues = run_startup_checks(config)
    if issues:
        for issue in issues:
            log_error(f"[ERROR] {issue}")
        return 1

    log(f"[START] set={config.set_code} out={config.output_root} images={config.download_images}")
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
