from .fetcher import Throttle, build_search_url, fetch_page
from .matcher import ResultSet, count_skill_matches
from .parser import (
    extract_skills,
    is_remote_job,
    parse_job_cards,
    parse_relative_date,
)
from .pipeline import scrape_jobs
from .ranker import rank_jobs

__all__ = [
    "Throttle", "build_search_url", "fetch_page",
    "ResultSet", "count_skill_matches",
    "extract_skills", "is_remote_job", "parse_job_cards", "parse_relative_date",
    "scrape_jobs", "rank_jobs",
]
