# archetype_scraper/services/extract.py
from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, FeatureNotFound

from archetype_scraper.constants import (
    CAPTION_CLASSES,
    CAPTION_SELECTOR,
    HEADING_TAG,
    NO_DESCRIPTION,
    NO_IMAGE_TITLE,
    NO_TITLE,
)


@dataclass
class ArchetypeRecord:
    title: str
    description: str
    image_label: str


def make_soup(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html, "html.parser")


def extract_image_labels(soup: BeautifulSoup) -> list[str]:
    """
    Caption paragraphs look like "Card Name; Other Card".
    Only the first name is used for the image lookup.
    """
    labels: list[str] = []
    for p in soup.select(CAPTION_SELECTOR):
        text = p.get_text().strip()
        labels.append(text.split(";", 1)[0].strip())
    return labels


def _is_caption(el) -> bool:
    classes = el.get("class") or []
    return any(c in CAPTION_CLASSES for c in classes)


def _description_for(heading) -> str:
    parts: list[str] = []
    for el in heading.find_next_siblings():
        if el.name == HEADING_TAG:
            break
        if el.name != "p" or _is_caption(el):
            continue
        text = el.get_text().strip()
        if text:
            parts.append(text)
    return " ".join(parts) or NO_DESCRIPTION


def extract_archetypes(html: str) -> list[ArchetypeRecord]:
    """
    One record per heading, in document order.
    Image labels are paired with headings by position, not by name.
    """
    soup = make_soup(html)
    labels = extract_image_labels(soup)

    records: list[ArchetypeRecord] = []
    for i, heading in enumerate(soup.find_all(HEADING_TAG)):
        title = heading.get_text().strip() or NO_TITLE
        image_label = labels[i] if i < len(labels) and labels[i] else NO_IMAGE_TITLE
        records.append(
            ArchetypeRecord(
                title=title,
                description=_description_for(heading),
                image_label=image_label,
            )
        )
    return records
