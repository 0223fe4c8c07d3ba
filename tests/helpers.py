"""HTML card builders and fake HTTP sessions for tests."""
from __future__ import annotations


def card_html(
    title: str = "Backend Engineer",
    company: str = "Acme",
    location: str = "Jakarta, Indonesia",
    job_id: str | None = "100",
    href: str | None = None,
    snippet: str = "",
    date_text: str = "",
    datetime_attr: str | None = None,
) -> str:
    if href is None:
        href = f"https://www.linkedin.com/jobs/view/{job_id}" if job_id else "https://example.com/job"
    time_attr = f' datetime="{datetime_attr}"' if datetime_attr else ""
    time_el = f'<time class="job-search-card__listdate"{time_attr}>{date_text}</time>' if (date_text or datetime_attr) else ""
    snippet_el = f'<p class="base-search-card__snippet">{snippet}</p>' if snippet else ""
    link = f'<a class="base-card__full-link" href="{href}"></a>' if href else ""
    return f"""
    <div class="base-card">
      {link}
      <h3 class="base-search-card__title">
        {title}
      </h3>
      <h4 class="base-search-card__subtitle">{company}</h4>
      <span class="job-search-card__location">{location}</span>
      {snippet_el}
      {time_el}
    </div>
    """


def page_html(*cards: str) -> str:
    return f"<html><body><ul class='jobs-search__results-list'>{''.join(cards)}</ul></body></html>"


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Answers each GET with the next scripted item; exceptions are raised."""

    def __init__(self, script) -> None:
        self.script = list(script)
        self.urls: list[str] = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.urls.append(url)
        if not self.script:
            return FakeResponse(page_html())
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, FakeResponse):
            return item
        return FakeResponse(item)

    def close(self) -> None:
        self.closed = True


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
