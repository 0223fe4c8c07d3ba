"""Matched-first ranking of scraped jobs."""
from __future__ import annotations

from jobrec.log import get_logger
from jobrec.models import JobRecord
from jobrec.scraper.matcher import count_skill_matches

log = get_logger(__name__)


def _is_masked(job: JobRecord) -> bool:
    """Listings served to anonymous visitors with '*'-obscured fields."""
    return any("*" in text for text in (job.title, job.company, job.location, job.description))


def rank_jobs(
    jobs: list[JobRecord],
    max_jobs: int | None = None,
    drop_masked: bool = True,
) -> list[JobRecord]:
    """Jobs with at least one skill match first, by descending match count.

    Ties and unmatched jobs keep their scrape order.
    """
    for job in jobs:
        job.skill_match_count = count_skill_matches(job)

    kept = [j for j in jobs if not _is_masked(j)] if drop_masked else list(jobs)
    matched = [j for j in kept if j.skill_match_count > 0]
    unmatched = [j for j in kept if j.skill_match_count == 0]
    matched.sort(key=lambda j: -j.skill_match_count)

    ranked = matched + unmatched
    if max_jobs is not None:
        ranked = ranked[:max_jobs]
    log.info(
        "Ranked %d jobs (%d matched, %d masked dropped) → returning %d",
        len(jobs), len(matched), len(jobs) - len(kept), len(ranked),
    )
    return ranked
