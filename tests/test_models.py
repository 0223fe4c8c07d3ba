"""Tests for job record and result serialisation."""
from datetime import datetime, timezone

from jobrec.models import JobRecord, RecommendationResult, ScrapeOptions, SkillProfile


def test_job_to_dict_output_shape():
    job = JobRecord(
        title="Backend Engineer",
        company="Acme",
        location="Remote",
        description="Go services",
        apply_url="https://www.linkedin.com/jobs/view/123",
        posted_date=datetime(2025, 1, 2, tzinfo=timezone.utc),
        external_id="123",
        skills=["Go"],
        is_remote=True,
        skill_match_count=1,
    )
    assert job.to_dict() == {
        "id": "123",
        "title": "Backend Engineer",
        "company": "Acme",
        "location": "Remote",
        "postedAt": "2025-01-02T00:00:00+00:00",
        "isRemote": True,
        "jobUrl": "https://www.linkedin.com/jobs/view/123",
        "applyUrl": "https://www.linkedin.com/jobs/view/123",
        "description": "Go services",
        "companyLogo": None,
        "skills": ["Go"],
        "skillMatchCount": 1,
    }


def test_id_without_external_id_is_stable_hash():
    a = JobRecord("T", "C", "L", "D", "https://x/1")
    b = JobRecord("T", "C", "Other", "Other", "https://x/1")
    assert a.id == b.id
    assert len(a.id) == 12
    assert a.id != JobRecord("T", "C", "L", "D", "https://x/2").id


def test_keyword_variations():
    assert ScrapeOptions(keywords=" React Developer, ,Frontend ,").keyword_variations() == [
        "React Developer",
        "Frontend",
    ]


def test_result_to_dict():
    result = RecommendationResult(jobs=[], analysis=SkillProfile(roles=("QA",)))
    assert result.to_dict() == {
        "jobs": [],
        "totalJobs": 0,
        "analysis": {"rolesIdentified": ["QA"], "skills": [], "experience": "mid"},
    }
