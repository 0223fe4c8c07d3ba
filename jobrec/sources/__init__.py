from .base import JobSource
from .linkedin import LinkedInScraperSource
from .linkedin_api import LinkedInApiSource

from jobrec.config import ScraperConfig
from jobrec.log import get_logger

log = get_logger(__name__)

__all__ = [
    "JobSource", "LinkedInScraperSource", "LinkedInApiSource", "get_source",
]


def get_source(env_getter, config: ScraperConfig | None = None) -> JobSource:
    choice = env_getter("JOB_SOURCE").lower()
    if choice == "api":
        api_key = env_getter("RAPIDAPI_KEY")
        if api_key:
            log.info("Using source: LinkedIn Job Search API (RapidAPI)")
            return LinkedInApiSource(api_key, config)
        log.warning("JOB_SOURCE=api but RAPIDAPI_KEY is not set, falling back to scraper")

    log.info("Using source: LinkedIn scraper")
    return LinkedInScraperSource(config)
