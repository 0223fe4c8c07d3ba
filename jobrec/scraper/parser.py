"""Extract job records from a search-results page.

Matching here is literal: remote detection and skill extraction
are plain lowercase substring checks, relative dates recognise only a handful
of units. Synonyms and stemming are not handled.
"""
from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from bs4 import BeautifulSoup, Tag

from jobrec.log import get_logger
from jobrec.models import JobRecord

log = get_logger(__name__)

CARD_SELECTORS: list[str] = [
    ".base-card",
    ".job-search-card",
    ".jobs-search__results-list li",
    "li.result-card",
]
TITLE_SELECTORS: list[str] = [
    ".base-search-card__title",
    ".job-search-card__title",
    "h3, .result-card__title",
]
COMPANY_SELECTORS: list[str] = [
    ".base-search-card__subtitle",
    ".job-search-card__company-name",
    "h4, .result-card__subtitle",
]
LOCATION_SELECTORS: list[str] = [
    ".job-search-card__location",
    ".result-card__location",
]
SNIPPET_SELECTORS: list[str] = [
    ".base-search-card__snippet",
    ".job-search-card__snippet",
]
LINK_SELECTORS: list[str] = [
    "a.base-card__full-link",
    "a[href*='/jobs/view/']",
    "a",
]
DATE_TEXT_SELECTOR = ".job-search-card__listdate, .job-search-card__listdate--new, time"

REMOTE_KEYWORDS: list[str] = ["remote", "work from home", "wfh", "anywhere"]

SITE_URL = "https://www.linkedin.com"

_JOB_ID_RE = re.compile(r"/jobs/view/(\d+)")
_LEADING_INT_RE = re.compile(r"^\s*(\d+)")


def _text(card: Tag, selectors: list[str]) -> str:
    """Concatenated text of the first selector that yields any text."""
    for sel in selectors:
        text = "".join(el.get_text() for el in card.select(sel))
        if text:
            return text.strip()
    return ""


def _href(card: Tag) -> str:
    for sel in LINK_SELECTORS:
        link = card.select_one(sel)
        if link is not None and link.get("href"):
            return str(link["href"]).strip()
    return ""


def _logo(card: Tag) -> str | None:
    img = card.select_one("img")
    if img is None:
        return None
    return img.get("data-delayed-url") or img.get("src") or None


def parse_relative_date(text: str, now: datetime | None = None) -> datetime | None:
    """'3 days ago' → now - 3 days. Unknown phrasing → None."""
    if not text:
        return None
    now = now or datetime.now(timezone.utc)
    low = text.lower()

    if "now" in low or "today" in low:
        return now
    try:
        m = _LEADING_INT_RE.match(text)
        n = (int(m.group(1)) if m else 0) or 1
        if "hour" in low:
            return now - timedelta(hours=n)
        if "day" in low:
            return now - timedelta(days=n)
        if "week" in low:
            return now - timedelta(days=n * 7)
    except (OverflowError, ValueError):
        log.debug("Date text out of range: %r", text)
    return None


def parse_iso_datetime(value: str) -> datetime | None:
    try:
        value = value.strip()
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        dt = datetime.fromisoformat(value)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def is_remote_job(location: str, title: str) -> bool:
    combined = f"{location} {title}".lower()
    return any(kw in combined for kw in REMOTE_KEYWORDS)


def extract_skills(title: str, description: str, tech_skills: list[str] | tuple[str, ...] = ()) -> list[str]:
    """Caller skills found verbatim (case-insensitive) in title + description."""
    if not tech_skills:
        return []
    combined = f"{title} {description}".lower()
    return [s for s in tech_skills if s.lower().strip() in combined]


def extract_job_id(url: str) -> str:
    m = _JOB_ID_RE.search(url)
    return m.group(1) if m else ""


def _find_cards(soup: BeautifulSoup) -> list[Tag]:
    for sel in CARD_SELECTORS:
        cards = soup.select(sel)
        if cards:
            return cards
    return []


def parse_card(
    card: Tag,
    tech_skills: list[str] | tuple[str, ...] = (),
    now: datetime | None = None,
    site_url: str = SITE_URL,
) -> JobRecord | None:
    """One record per card, or None when title, company or link is missing."""
    title = _text(card, TITLE_SELECTORS)
    company = _text(card, COMPANY_SELECTORS)
    apply_url = _href(card)
    if not (title and company and apply_url):
        return None

    location = _text(card, LOCATION_SELECTORS)
    snippet = _text(card, SNIPPET_SELECTORS)

    posted: datetime | None = None
    time_el = card.select_one("time[datetime]")
    if time_el is not None:
        posted = parse_iso_datetime(str(time_el["datetime"]))
    if posted is None:
        date_text = "".join(el.get_text() for el in card.select(DATE_TEXT_SELECTOR)).strip()
        posted = parse_relative_date(date_text, now)

    return JobRecord(
        title=title,
        company=company,
        location=location or "Not specified",
        description=snippet or f"{title} position at {company}. Check LinkedIn for full details.",
        apply_url=apply_url if apply_url.startswith("http") else f"{site_url}{apply_url}",
        posted_date=posted,
        external_id=extract_job_id(apply_url),
        skills=extract_skills(title, snippet, tech_skills),
        is_remote=is_remote_job(location, title),
        company_logo=_logo(card),
    )


def parse_job_cards(
    html: str,
    tech_skills: list[str] | tuple[str, ...] = (),
    limit: int | None = None,
    now: datetime | None = None,
    site_url: str = SITE_URL,
) -> list[JobRecord]:
    """Parse every complete card in *html*, stopping after *limit* records."""
    soup = BeautifulSoup(html, "html.parser")
    now = now or datetime.now(timezone.utc)
    jobs: list[JobRecord] = []
    for card in _find_cards(soup):
        if limit is not None and len(jobs) >= limit:
            break
        try:
            job = parse_card(card, tech_skills, now=now, site_url=site_url)
        except Exception as exc:
            log.warning("Skipping unreadable card: %s", exc)
            continue
        if job is None:
            log.debug("Skipping incomplete card")
            continue
        jobs.append(job)
    return jobs
