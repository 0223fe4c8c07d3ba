"""LinkedIn Job Search API (RapidAPI): JSON listings, field-mapped and ranked."""
from __future__ import annotations

from typing import Any

import requests

from jobrec.config import ScraperConfig
from jobrec.errors import UpstreamFetchError
from jobrec.log import get_logger
from jobrec.models import JobRecord, ScrapeOptions
from jobrec.retry import retry
from jobrec.scraper.parser import extract_skills, parse_iso_datetime
from jobrec.scraper.ranker import rank_jobs
from jobrec.sources.base import JobSource

log = get_logger(__name__)

API_HOST = "linkedin-job-search-api.p.rapidapi.com"
API_URL = f"https://{API_HOST}/active-jb-7d"


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, UpstreamFetchError):
        return exc.status_code == 429 or (exc.status_code or 0) >= 500
    return True


def _first(hit: dict[str, Any], *keys: str, default: Any = "") -> Any:
    for k in keys:
        v = hit.get(k)
        if v:
            return v
    return default


def map_listing(hit: dict[str, Any], tech_skills: tuple[str, ...] = ()) -> JobRecord:
    title = str(_first(hit, "title", "jobTitle", default="No title"))
    description = str(_first(hit, "description", "jobDescription"))
    job_url = str(_first(hit, "url", "jobUrl", "link"))
    posted = _first(hit, "postedAt", "postedDate", "listedAt", default=None)
    return JobRecord(
        title=title,
        company=str(_first(hit, "company", "companyName", default="Unknown Company")),
        location=str(_first(hit, "location", "jobLocation", default="Remote")),
        description=description,
        apply_url=str(_first(hit, "applyUrl", default=job_url)),
        posted_date=parse_iso_datetime(str(posted)) if posted else None,
        external_id=str(_first(hit, "jobId", "id")),
        skills=extract_skills(title, description, tech_skills),
        is_remote=bool(hit.get("isRemote")),
        company_logo=_first(hit, "companyLogo", "logo", default=None),
        source="linkedin_api",
    )


class LinkedInApiSource(JobSource):
    def __init__(self, api_key: str, config: ScraperConfig | None = None) -> None:
        self.api_key = api_key
        self.config = config or ScraperConfig()

    @retry(
        max_attempts=2,
        base_delay=1.5,
        retryable=(requests.ConnectionError, requests.Timeout, UpstreamFetchError),
        retry_if=_is_transient,
    )
    def _fetch(self, options: ScrapeOptions) -> list[dict[str, Any]]:
        # The API filters on a single title; use the first keyword variation.
        keywords = options.keyword_variations()
        title = keywords[0] if keywords else ""
        r = requests.get(
            API_URL,
            params={
                "limit": str(options.max_jobs),
                "offset": "0",
                "title_filter": f'"{title}"',
                "location_filter": f'"{options.location}"',
            },
            headers={
                "x-rapidapi-key": self.api_key,
                "x-rapidapi-host": API_HOST,
            },
            timeout=self.config.timeout,
        )
        if r.status_code != 200:
            raise UpstreamFetchError(API_URL, r.status_code)
        data = r.json()
        # The API answers with a bare array; older plans wrap it in {"data": [...]}.
        if isinstance(data, dict):
            data = data.get("data") or []
        return data if isinstance(data, list) else []

    def search(self, options: ScrapeOptions) -> list[JobRecord]:
        hits = self._fetch(options)
        if not hits:
            log.warning("LinkedIn API returned no jobs for %r", options.keywords)
            return []
        jobs = [map_listing(h, options.tech_skills) for h in hits[: options.max_jobs]]
        log.info("LinkedIn API returned %d jobs", len(jobs))
        return rank_jobs(jobs, max_jobs=options.max_jobs, drop_masked=False)
