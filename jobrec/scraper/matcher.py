"""Running result set with duplicate suppression, and skill match counting."""
from __future__ import annotations

from jobrec.log import get_logger
from jobrec.models import JobRecord

log = get_logger(__name__)


class ResultSet:
    """Records collected across all pages and keywords of one run.

    A record is a duplicate when it shares a non-empty ``external_id`` with one
    already held; records without an id are always kept.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._jobs: list[JobRecord] = []
        self._seen_ids: set[str] = set()

    def __len__(self) -> int:
        return len(self._jobs)

    @property
    def jobs(self) -> list[JobRecord]:
        return list(self._jobs)

    @property
    def full(self) -> bool:
        return len(self._jobs) >= self.capacity

    @property
    def remaining(self) -> int:
        return max(self.capacity - len(self._jobs), 0)

    def is_duplicate(self, job: JobRecord) -> bool:
        return bool(job.external_id) and job.external_id in self._seen_ids

    def add(self, job: JobRecord) -> bool:
        if self.full or self.is_duplicate(job):
            return False
        self._jobs.append(job)
        if job.external_id:
            self._seen_ids.add(job.external_id)
        return True

    def extend(self, jobs: list[JobRecord]) -> int:
        """Add what fits; returns how many were new."""
        added = 0
        for job in jobs:
            if self.full:
                break
            if self.add(job):
                added += 1
            else:
                log.debug("Duplicate job id=%s dropped", job.external_id)
        return added


def count_skill_matches(job: JobRecord) -> int:
    return len(job.skills)
