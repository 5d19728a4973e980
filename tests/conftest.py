from __future__ import annotations

import json

import pytest
import requests

from archetype_scraper.config import ScrapeConfig

SOURCE_HTML = """
<html><body>
<section id="archetypes">
  <h3>Eldrazi Ramp</h3>
  <p class="title">Emrakul, the World Anew; Ulamog</p>
  <p>Ramp into huge colorless threats.</p>
  <p class="subtitle">Signpost uncommon</p>
  <p>Cast them early.</p>
  <h3>Energy Aggro</h3>
  <p class="title">Guide of Souls</p>
  <p>Go wide and pump energy.</p>
  <h3>Artifact Control</h3>
</section>
</body></html>
"""


class FakeResponse:
    def __init__(self, status_code=200, text="", json_data=None, content=b"", url=""):
        self.status_code = status_code
        self.text = text
        self._json = json_data
        self.content = content
        self.url = url
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.closed = True

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error: {self.url}", response=self)

    def json(self):
        if self._json is None:
            return json.loads(self.text)
        return self._json

    def iter_content(self, chunk_size=1024):
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start : start + chunk_size]


class FakeSession:
    """Routes GETs through a handler(url, params) and records every call."""

    def __init__(self, handler):
        self.handler = handler
        self.calls: list[tuple[str, dict | None]] = []

    def get(self, url, params=None, timeout=None, stream=False, **kwargs):
        self.calls.append((url, params))
        result = self.handler(url, params)
        if isinstance(result, Exception):
            raise result
        result.url = url
        return result


def scryfall_handler(images: dict[str, str], page_html: str = SOURCE_HTML):
    """Serve the archetype page, Scryfall lookups and image bytes."""

    def handler(url, params):
        if url.endswith("-archetypes.html"):
            return FakeResponse(text=page_html)
        if url.startswith("https://api.scryfall.com/cards/named"):
            name = params["fuzzy"]
            if name in images:
                return FakeResponse(json_data={"name": name, "image_uris": {"normal": images[name]}})
            return FakeResponse(json_data={"object": "card", "name": name})
        if url.startswith("https://cards.example/"):
            return FakeResponse(content=b"\xff\xd8\xff" + url.encode() * 10)
        return FakeResponse(status_code=404)

    return handler


@pytest.fixture
def source_html() -> str:
    return SOURCE_HTML


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture
def config(tmp_path) -> ScrapeConfig:
    return ScrapeConfig(
        set_code="mh3",
        output_root=tmp_path,
        base_url="https://archetypes.example",
        delay=0,
    )


@pytest.fixture
def scryfall():
    return scryfall_handler


@pytest.fixture
def fake_response():
    return FakeResponse
