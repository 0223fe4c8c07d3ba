"""Analyse CV text with an LLM (Groq, OpenAI-compatible) into a SkillProfile."""
from __future__ import annotations

import json
from typing import Any

import openai
from openai import OpenAI

from jobrec.config import DEFAULT_LLM_MODEL, get_env
from jobrec.errors import ConfigError
from jobrec.log import get_logger
from jobrec.models import SkillProfile
from jobrec.retry import retry

log = get_logger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
MAX_CV_CHARS = 10000

EXPERIENCE_LEVEL_CODES: dict[str, str] = {
    "entry": "2",   # Entry level
    "mid": "3",     # Associate
    "senior": "4",  # Mid-Senior level
}

_ANALYSIS_PROMPT = """\
You are an expert career advisor and talent analyst.

TASK:
Analyze this CV and extract key information for job recommendations.

CV CONTENT:
"{cv_text}"

Return ONLY valid JSON with these exact keys:
{{
  "roles": ["Primary Role 1", "Primary Role 2"],
  "skills": ["Skill 1", "Skill 2", "Skill 3"],
  "experienceLevel": "entry" | "mid" | "senior",
  "keywords": "keyword1, keyword2, keyword3"
}}

Rules:
- "roles": top 2-3 job roles based on experience.
- "skills": top technical skills (max 5).
- "experienceLevel": based on years and responsibilities.
- "keywords": best job-search keywords, comma-separated. Job titles only,
  no contract types such as Intern, Contract, Full-time or Remote.
"""

_TRANSIENT_ERRORS = (
    openai.APIConnectionError,
    openai.APITimeoutError,
    openai.RateLimitError,
)


def map_experience_level(level: str) -> str:
    """Experience level → LinkedIn ``f_E`` filter code (defaults to Associate)."""
    return EXPERIENCE_LEVEL_CODES.get((level or "").lower(), "3")


@retry(max_attempts=3, base_delay=2.0, retryable=_TRANSIENT_ERRORS)
def _complete(client: OpenAI, model: str, prompt: str) -> str:
    resp = client.chat.completions.create(
        model=model,
        messages=[{"role": "user", "content": prompt}],
        max_tokens=600,
        temperature=0.1,
    )
    return (resp.choices[0].message.content or "").strip()


def _string_list(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise ValueError(f"LLM returned {key!r} as {type(value).__name__}, expected a list")
    return tuple(str(v).strip() for v in value if str(v).strip())


def _keywords(data: dict[str, Any]) -> str:
    value = data.get("keywords") or ""
    if isinstance(value, list):
        return ", ".join(_string_list(data, "keywords"))
    return str(value).strip()


def parse_analysis(raw: str) -> SkillProfile:
    """Decode the model's JSON reply. Malformed JSON, or a non-list roles/skills, raises ValueError."""
    start = raw.find("{")
    end = raw.rfind("}") + 1
    if start == -1 or end == 0:
        raise ValueError("LLM did not return valid JSON")
    data: dict[str, Any] = json.loads(raw[start:end])
    return SkillProfile(
        roles=_string_list(data, "roles"),
        skills=_string_list(data, "skills"),
        experience_level=str(data.get("experienceLevel") or "mid").strip().lower(),
        keywords=_keywords(data),
    )


def analyze_cv(
    cv_text: str,
    api_key: str | None = None,
    model: str | None = None,
    client: OpenAI | None = None,
) -> SkillProfile:
    if client is None:
        api_key = api_key or get_env("GROQ_API_KEY")
        if not api_key:
            raise ConfigError("GROQ_API_KEY is not set; cannot analyse CV")
        client = OpenAI(api_key=api_key, base_url=GROQ_BASE_URL)
    model = model or get_env("GROQ_LLM_MODEL", DEFAULT_LLM_MODEL)

    log.info("Analysing CV with LLM (%s)", model)
    raw = _complete(client, model, _ANALYSIS_PROMPT.format(cv_text=cv_text[:MAX_CV_CHARS]))
    profile = parse_analysis(raw)
    log.info(
        "Analysis complete: roles=%s, skills=%d, level=%s",
        list(profile.roles), len(profile.skills), profile.experience_level,
    )
    return profile
