from __future__ import annotations

from pathlib import Path


def is_writable_dir(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
        probe = path / ".write_test"
        with open(probe, "w", encoding="utf-8") as f:
            f.write("ok")
        probe.unlink()
        return True
    except OSError:
        return False


def image_rel_path(set_code: str, filename: str) -> str:
    # served from the site root, so always forward slashes
    return f"images/{set_code}/{filename}"


def images_dir(output_root: Path, set_code: str) -> Path:
    return output_root / "images" / set_code


def sets_dir(output_root: Path) -> Path:
    return output_root / "sets"


def page_path(output_root: Path, set_code: str) -> Path:
    return sets_dir(output_root) / f"{set_code}.html"
