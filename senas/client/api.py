import logging
import os

import httpx

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000"


class ApiClient:
    """Credentialed HTTP access to the game server.

    One instance owns one cookie jar, so the guest session cookie set by
    ``/api/start-guest-session`` rides along on every later request.
    """

    def __init__(self, base_url=None, transport=None, timeout=10.0):
        self.base_url = (base_url or os.environ.get("SENAS_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.http = httpx.Client(base_url=self.base_url, transport=transport, timeout=timeout)

    def get(self, path, **kwargs) -> httpx.Response:
        logger.debug("GET %s", path)
        return self.http.get(path, **kwargs)

    def post(self, path, **kwargs) -> httpx.Response:
        logger.debug("POST %s", path)
        return self.http.post(path, **kwargs)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
