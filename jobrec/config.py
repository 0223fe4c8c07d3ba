"""Load env and scraper configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobrec.errors import ConfigError
from jobrec.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SCRAPER_CONFIG_PATH: Path = CONFIG_DIR / "scraper.yaml"
DATA_DIR: Path = ROOT_DIR / "data"
CV_DIR: Path = DATA_DIR / "cv"

DEFAULT_LLM_MODEL = "llama-3.3-70b-versatile"

BROWSER_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}


@dataclass(frozen=True)
class ScraperConfig:
    """Immutable settings for one scraping pipeline run."""

    base_url: str = "https://www.linkedin.com/jobs/search"
    site_url: str = "https://www.linkedin.com"
    headers: dict[str, str] = field(default_factory=lambda: dict(BROWSER_HEADERS))
    timeout: float = 15.0
    delay: float = 1.0
    jobs_per_page: int = 25
    # Extra raw records collected beyond max_jobs so ranking has headroom.
    overscan: int = 15
    location: str = "Indonesia"
    scrape_target: int = 40
    top_n: int = 25
    job_type: str = "F"


def load_scraper_config(path: Path | None = None) -> ScraperConfig:
    """Defaults, overridden by config/scraper.yaml when present."""
    path = path or SCRAPER_CONFIG_PATH
    config = ScraperConfig()
    if not path.exists():
        return config

    with open(path, "r") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping")

    known = {f.name for f in fields(ScraperConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        log.warning("Ignoring unknown scraper config keys: %s", ", ".join(unknown))

    overrides = {k: v for k, v in data.items() if k in known}
    if "headers" in overrides:
        # Partial header overrides keep the rest of the browser header set.
        overrides["headers"] = {**BROWSER_HEADERS, **(overrides["headers"] or {})}
    log.debug("Scraper config overrides from %s: %s", path.name, sorted(overrides))
    return replace(config, **overrides)


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def ensure_dirs() -> None:
    for d in (DATA_DIR, CV_DIR):
        d.mkdir(parents=True, exist_ok=True)
