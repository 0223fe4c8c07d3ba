import pytest
import requests

from jobrec.config import ScraperConfig
from jobrec.scraper.fetcher import Throttle
from tests.helpers import RecordingSleep


@pytest.fixture
def config() -> ScraperConfig:
    return ScraperConfig()


@pytest.fixture
def no_wait_throttle() -> Throttle:
    return Throttle(0.0, sleep=RecordingSleep())


@pytest.fixture
def timeout_error() -> requests.Timeout:
    return requests.Timeout("read timed out")
