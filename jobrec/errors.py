"""Error taxonomy with HTTP-style status codes, and the mapping used by callers."""
from __future__ import annotations


class AppError(Exception):
    status: int = 500

    def __init__(self, message: str = "", status: int | None = None) -> None:
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__
        if status is not None:
            self.status = status


class BadRequestError(AppError):
    status = 400


class UnauthorizedError(AppError):
    status = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class NotFoundError(AppError):
    status = 404

    def __init__(self, message: str = "NotFound") -> None:
        super().__init__(message)


class ConfigError(AppError):
    """Missing credentials or unusable configuration."""


class UpstreamFetchError(AppError):
    """A job-search page or listing API answered with something other than 200."""

    status = 502

    def __init__(self, url: str, status_code: int | None = None, reason: str = "") -> None:
        detail = f"HTTP {status_code}" if status_code is not None else (reason or "request failed")
        super().__init__(f"Upstream fetch failed for {url}: {detail}")
        self.url = url
        self.status_code = status_code


def error_handler(exc: BaseException) -> tuple[str, int]:
    """Map an exception to ``(message, status)``; unknown errors stay opaque."""
    if isinstance(exc, AppError):
        return exc.message, exc.status
    return "Internal Server Error", 500
