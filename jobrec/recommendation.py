"""
Job recommendations for a user.

Runs: load CV → analyse with LLM → search jobs → rank (matched first) → top N.
"""
from __future__ import annotations

from typing import Callable

from jobrec.analyzer import analyze_cv, map_experience_level
from jobrec.config import ScraperConfig, get_env, load_scraper_config
from jobrec.documents import DocumentStore
from jobrec.errors import NotFoundError
from jobrec.log import get_logger
from jobrec.models import RecommendationResult, ScrapeOptions, SkillProfile
from jobrec.sources import JobSource, get_source

log = get_logger(__name__)

CV_NOT_FOUND = "CV document not found. Please upload your CV first."


def get_job_recommendations(
    user_id: str,
    *,
    store: DocumentStore | None = None,
    analyzer: Callable[[str], SkillProfile] = analyze_cv,
    source: JobSource | None = None,
    config: ScraperConfig | None = None,
) -> RecommendationResult:
    """Recommend jobs for *user_id* from their stored CV.

    Raises NotFoundError when the user has no CV. Analysis and search errors
    propagate; there is no partial result.
    """
    config = config or load_scraper_config()
    store = store or DocumentStore()
    source = source or get_source(get_env, config)

    log.info("Fetching CV for user %s", user_id)
    doc = store.get_cv_user(user_id)
    if doc is None or not doc.extracted_text:
        raise NotFoundError(CV_NOT_FOUND)

    profile = analyzer(doc.extracted_text)

    keywords = profile.search_keyword
    if not keywords:
        log.warning("No keywords found from CV analysis")
    experience_code = map_experience_level(profile.experience_level)
    log.info(
        "Searching jobs with keywords %r (experience %s → f_E=%s)",
        keywords, profile.experience_level, experience_code,
    )

    jobs = source.search(
        ScrapeOptions(
            keywords=keywords,
            location=config.location,
            max_jobs=config.scrape_target,
            experience_level=experience_code,
            job_type=config.job_type,
            tech_skills=profile.skills,
        )
    )

    top = jobs[: config.top_n]
    log.info("Found %d relevant jobs, returning top %d", len(jobs), len(top))
    return RecommendationResult(jobs=top, analysis=profile)
