"""Data models for job records, scrape options and CV analysis."""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class JobRecord:
    title: str
    company: str
    location: str
    description: str
    apply_url: str
    posted_date: datetime | None = None
    external_id: str = ""
    skills: list[str] = field(default_factory=list)
    is_remote: bool = False
    skill_match_count: int = 0
    company_logo: str | None = None
    source: str = "linkedin"

    @property
    def id(self) -> str:
        if self.external_id:
            return self.external_id
        key = f"{self.title}|{self.company}|{self.apply_url}"
        return hashlib.sha256(key.encode()).hexdigest()[:12]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "postedAt": self.posted_date.isoformat() if self.posted_date else None,
            "isRemote": self.is_remote,
            "jobUrl": self.apply_url,
            "applyUrl": self.apply_url,
            "description": self.description,
            "companyLogo": self.company_logo,
            "skills": list(self.skills),
            "skillMatchCount": self.skill_match_count,
        }


@dataclass(frozen=True)
class ScrapeOptions:
    keywords: str
    location: str = "Indonesia"
    max_jobs: int = 100
    experience_level: str | None = None
    job_type: str | None = None
    tech_skills: tuple[str, ...] = ()

    def keyword_variations(self) -> list[str]:
        """Comma-separated keywords, trimmed, empties dropped."""
        return [k.strip() for k in self.keywords.split(",") if k.strip()]


@dataclass(frozen=True)
class SkillProfile:
    roles: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    experience_level: str = "mid"
    keywords: str = ""

    @property
    def search_keyword(self) -> str:
        return self.keywords or (self.roles[0] if self.roles else "")

    def to_analysis(self) -> dict[str, Any]:
        return {
            "rolesIdentified": list(self.roles),
            "skills": list(self.skills),
            "experience": self.experience_level,
        }


@dataclass
class RecommendationResult:
    jobs: list[JobRecord]
    analysis: SkillProfile

    @property
    def total_jobs(self) -> int:
        return len(self.jobs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "jobs": [j.to_dict() for j in self.jobs],
            "totalJobs": self.total_jobs,
            "analysis": self.analysis.to_analysis(),
        }
