"""Keyword × page scraping loop: fetch, parse, dedupe, rank."""
from __future__ import annotations

import math
from datetime import datetime, timezone

import requests

from jobrec.config import ScraperConfig
from jobrec.errors import UpstreamFetchError
from jobrec.log import get_logger
from jobrec.models import JobRecord, ScrapeOptions
from jobrec.scraper.fetcher import Throttle, build_search_url, fetch_page
from jobrec.scraper.matcher import ResultSet
from jobrec.scraper.parser import parse_job_cards
from jobrec.scraper.ranker import rank_jobs

log = get_logger(__name__)


def scrape_jobs(
    options: ScrapeOptions,
    config: ScraperConfig | None = None,
    session: requests.Session | None = None,
    throttle: Throttle | None = None,
) -> list[JobRecord]:
    """Scrape, dedupe and rank up to ``options.max_jobs`` jobs.

    Pages are fetched one at a time with ``config.delay`` seconds between
    requests. A failed page is logged and skipped; it never aborts the run.
    """
    config = config or ScraperConfig()
    throttle = throttle or Throttle(config.delay)
    own_session = session is None
    session = session or requests.Session()

    raw_target = options.max_jobs + config.overscan
    max_pages = math.ceil(raw_target / config.jobs_per_page) + 1
    keywords = options.keyword_variations()
    results = ResultSet(raw_target)
    now = datetime.now(timezone.utc)

    log.info(
        "Target: %d jobs (scraping up to %d raw) for keywords: %s",
        options.max_jobs, raw_target, ", ".join(keywords) or "<none>",
    )

    try:
        for keyword in keywords:
            if results.full:
                break
            log.info("Searching %r in %s", keyword, options.location)
            for page_num in range(max_pages):
                if results.full:
                    break
                url = build_search_url(
                    config,
                    keyword,
                    options.location,
                    options.experience_level,
                    options.job_type,
                    page_num,
                )
                throttle.wait()
                try:
                    html = fetch_page(session, url, config)
                except (requests.RequestException, UpstreamFetchError) as exc:
                    log.warning("Page %d for %r failed: %s", page_num + 1, keyword, exc)
                    continue

                try:
                    page_jobs = parse_job_cards(
                        html,
                        options.tech_skills,
                        limit=results.remaining,
                        now=now,
                        site_url=config.site_url,
                    )
                except Exception as exc:
                    log.warning("Page %d for %r could not be parsed: %s", page_num + 1, keyword, exc)
                    continue
                if not page_jobs:
                    log.info("No jobs on page %d for %r", page_num + 1, keyword)
                    break

                added = results.extend(page_jobs)
                log.info(
                    "Page %d for %r: added %d, total %d/%d",
                    page_num + 1, keyword, added, len(results), raw_target,
                )
    finally:
        if own_session:
            session.close()

    return rank_jobs(results.jobs, max_jobs=options.max_jobs)
