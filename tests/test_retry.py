"""Tests for the retry decorator."""
import pytest

from jobrec.retry import retry


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    delays = []
    monkeypatch.setattr("jobrec.retry.time.sleep", delays.append)
    return delays


def test_retries_then_succeeds(no_sleep):
    calls = []

    @retry(max_attempts=3, base_delay=1.0, jitter=False, retryable=(ConnectionError,))
    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise ConnectionError("down")
        return "ok"

    assert flaky() == "ok"
    assert len(calls) == 3
    assert no_sleep == [1.0, 2.0]


def test_gives_up_after_max_attempts():
    @retry(max_attempts=2, jitter=False, retryable=(ConnectionError,))
    def always_down():
        raise ConnectionError("down")

    with pytest.raises(ConnectionError):
        always_down()


def test_non_retryable_propagates_immediately():
    calls = []

    @retry(max_attempts=3, retryable=(ConnectionError,))
    def broken():
        calls.append(1)
        raise ValueError("bad json")

    with pytest.raises(ValueError):
        broken()
    assert len(calls) == 1


def test_retry_if_narrows_retryable():
    calls = []

    class HTTPError(Exception):
        def __init__(self, status):
            self.status = status

    @retry(max_attempts=3, jitter=False, retryable=(HTTPError,), retry_if=lambda e: e.status >= 500)
    def call():
        calls.append(1)
        raise HTTPError(404)

    with pytest.raises(HTTPError):
        call()
    assert len(calls) == 1
