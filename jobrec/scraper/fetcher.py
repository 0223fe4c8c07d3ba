"""Search URL construction and throttled page fetching."""
from __future__ import annotations

import time
from typing import Callable
from urllib.parse import urlencode

import requests

from jobrec.config import ScraperConfig
from jobrec.errors import UpstreamFetchError
from jobrec.log import get_logger

log = get_logger(__name__)


def build_search_url(
    config: ScraperConfig,
    keyword: str,
    location: str,
    experience_level: str | None = None,
    job_type: str | None = None,
    page_num: int = 0,
) -> str:
    params: list[tuple[str, str]] = [
        ("keywords", keyword),
        ("location", location),
        ("sortBy", "DD"),
        ("position", "1"),
        ("pageNum", str(page_num)),
        ("start", str(page_num * config.jobs_per_page)),
    ]
    if experience_level:
        params.append(("f_E", experience_level))
    if job_type:
        params.append(("f_JT", job_type))
    return f"{config.base_url}?{urlencode(params)}"


def fetch_page(session: requests.Session, url: str, config: ScraperConfig) -> str:
    """GET *url*; anything but HTTP 200 raises UpstreamFetchError. No retry."""
    r = session.get(url, headers=config.headers, timeout=config.timeout)
    if r.status_code != 200:
        raise UpstreamFetchError(url, r.status_code)
    return r.text


class Throttle:
    """Keeps at least *interval* seconds between consecutive requests."""

    def __init__(
        self,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._last: float | None = None

    def wait(self) -> None:
        if self._last is not None:
            remaining = self.interval - (self._clock() - self._last)
            if remaining > 0:
                log.debug("Throttling %.2fs before next request", remaining)
                self._sleep(remaining)
        self._last = self._clock()
