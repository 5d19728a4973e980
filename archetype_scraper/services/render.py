# archetype_scraper/services/render.py
from __future__ import annotations

import html as html_lib
from typing import Sequence

from archetype_scraper.constants import GROUP_SIZE
from archetype_scraper.services.extract import ArchetypeRecord

FONT_URL = "https://fonts.googleapis.com/css2?family=Quicksand:wght@400;600;700&display=swap"
STYLESHEET = "/style.css"

HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <link rel="shortcut icon" href="favicon.ico" />
  <link href="{font_url}" rel="stylesheet" />
  <link rel="stylesheet" type="text/css" href="{stylesheet}" />
  <title>{title}</title>
</head>
<body>
  <page size="A4">
  <h1>{title}</h1>
  <div class="archetypes">
"""

FOOT = """  </div>
  </page>
</body>
</html>
"""

GROUP_OPEN = '    <div class="archetypes">\n'
GROUP_CLOSE = "    </div>\n"


def _esc(text: str) -> str:
    return html_lib.escape(text, quote=True)


def render_archetype(record: ArchetypeRecord, image_path: str | None) -> str:
    lines = [
        '      <div class="archetype">',
        f"        <h2>{_esc(record.title)}</h2>",
    ]
    if image_path:
        lines.append(f'        <img src="/{_esc(image_path)}" alt="{_esc(record.image_label)}" />')
    lines.append(f"        <span>{_esc(record.description)}</span>")
    lines.append("      </div>")
    return "\n".join(lines) + "\n"


def render_page(
    records: Sequence[ArchetypeRecord],
    image_paths: dict[str, str],
    *,
    title: str = "Archetypes",
) -> str:
    """
    Build the full page. Records are wrapped in groups of GROUP_SIZE;
    a record without an entry in image_paths renders without an <img>.
    """
    parts = [
        HEAD.format(
            font_url=_esc(FONT_URL),
            stylesheet=STYLESHEET,
            title=_esc(title),
        )
    ]
    last = len(records) - 1
    for i, record in enumerate(records):
        if i % GROUP_SIZE == 0:
            parts.append(GROUP_OPEN)
        parts.append(render_archetype(record, image_paths.get(record.image_label)))
        if (i + 1) % GROUP_SIZE == 0 or i == last:
            parts.append(GROUP_CLOSE)
    parts.append(FOOT)
    return "".join(parts)
