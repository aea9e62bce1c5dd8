from __future__ import annotations

import logging
import time
from typing import Any

import requests

from lyrics_picker.errors import NotFound

logger = logging.getLogger(__name__)

USER_AGENT = "lyrics-picker/0.1"


class HttpClient:
    """Thin GET wrapper shared by sources: timeout, retries with linear backoff, 404 -> NotFound."""

    def __init__(
        self,
        *,
        timeout_s: float = 10.0,
        max_retries: int = 3,
        backoff_base_s: float = 1.0,
        session: requests.Session | None = None,
    ):
        self.timeout_s = timeout_s
        self.max_retries = max(max_retries, 1)
        self.backoff_base_s = backoff_base_s
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        for attempt in range(1, self.max_retries + 1):
            try:
                r = self.session.get(url, timeout=self.timeout_s, **kwargs)
                if r.status_code == 404:
                    raise NotFound(url)
                r.raise_for_status()
                return r
            except requests.RequestException as e:
                logger.warning("GET %s failed (attempt %s/%s): %s", url, attempt, self.max_retries, e)
                # 429 is the only client error worth retrying
                if attempt == self.max_retries or _is_client_error(e):
                    raise
                time.sleep(self.backoff_base_s * attempt)
        raise AssertionError("unreachable")

    def get_json(self, url: str, **kwargs: Any) -> Any:
        return self.get(url, **kwargs).json()

    def get_text(self, url: str, **kwargs: Any) -> str:
        return self.get(url, **kwargs).text


def _is_client_error(e: requests.RequestException) -> bool:
    if e.response is None:
        return False
    status = e.response.status_code
    return 400 <= status < 500 and status != 429
