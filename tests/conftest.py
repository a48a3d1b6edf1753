import pytest

from api_config import default_config
from tests.http_fakes import FakeTransport

BASE_URL = "https://someUrl.com/"


@pytest.fixture(autouse=True)
def base_url():
    previous = default_config.base_url
    default_config.set_base_url(BASE_URL)
    yield BASE_URL
    default_config.set_base_url(previous)


@pytest.fixture
def transport():
    return FakeTransport()
