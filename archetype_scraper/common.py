"""Shared helpers for the archetype scraper."""

from __future__ import annotations

import re
import sys


def normalize_ws(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def log(msg: str, verbose: bool = True) -> None:
    if verbose:
        print(msg, flush=True)


def log_error(msg: str) -> None:
    print(msg, file=sys.stderr, flush=True)
