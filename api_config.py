# api_config.py - process-wide base URL store
import os

from utils.logger import get_logger

logger = get_logger(__name__)


class APIConfig:
    """Holds the base URL every request is built from.

    Written once at startup, read on every request. There is no locking;
    callers that mutate it from several threads must synchronize themselves.
    """

    def __init__(self, base_url: str = ""):
        self._base_url = base_url or ""

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_base_url(self, url: str) -> None:
        logger.debug("Base URL set to %s", url)
        self._base_url = url


# API_BASE_URL seeds the store; set_base_url overrides it
default_config = APIConfig(os.environ.get("API_BASE_URL", ""))


def set_base_url(url: str) -> None:
    default_config.set_base_url(url)


def get_base_url() -> str:
    return default_config.base_url
