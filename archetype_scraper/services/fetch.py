# archetype_scraper/services/fetch.py
from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class FetchError(RuntimeError):
    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{message}: {url}")
        self.url = url
        self.status_code = status_code


def build_session(retries: int = 0) -> requests.Session:
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Accept-Language": "en-US,en;q=0.9",
        }
    )
    # retries=0 means one attempt per request
    retry = Retry(
        total=retries,
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
        respect_retry_after_header=True,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def _get(session: requests.Session, url: str, *, params: dict | None, timeout: float) -> requests.Response:
    try:
        r = session.get(url, params=params, timeout=timeout)
        r.raise_for_status()
    except requests.HTTPError as ex:
        status = ex.response.status_code if ex.response is not None else None
        raise FetchError(url, f"HTTP {status}", status_code=status) from ex
    except requests.RequestException as ex:
        raise FetchError(url, f"request failed ({ex})") from ex
    return r


def fetch_text(session: requests.Session, url: str, *, timeout: float) -> str:
    return _get(session, url, params=None, timeout=timeout).text


def fetch_json(session: requests.Session, url: str, *, params: dict | None = None, timeout: float) -> dict:
    r = _get(session, url, params=params, timeout=timeout)
    try:
        data = r.json()
    except ValueError as ex:
        raise FetchError(url, "invalid JSON") from ex
    if not isinstance(data, dict):
        raise FetchError(url, "unexpected JSON shape")
    return data
