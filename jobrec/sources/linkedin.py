"""Public LinkedIn job-search pages, scraped and ranked by skill match."""
from __future__ import annotations

from jobrec.config import ScraperConfig
from jobrec.log import get_logger
from jobrec.models import JobRecord, ScrapeOptions
from jobrec.scraper.pipeline import scrape_jobs
from jobrec.sources.base import JobSource

log = get_logger(__name__)


class LinkedInScraperSource(JobSource):
    def __init__(self, config: ScraperConfig | None = None) -> None:
        self.config = config or ScraperConfig()

    def search(self, options: ScrapeOptions) -> list[JobRecord]:
        jobs = scrape_jobs(options, self.config)
        log.info("LinkedIn scraper returned %d jobs", len(jobs))
        return jobs
