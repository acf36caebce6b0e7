from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger("leadgen.http")

RETRYABLE_STATUSES = {429, 500, 502, 503, 504}


@dataclass
class RequestManager:
    timeout_seconds: int = 10
    max_retries: int = 3
    backoff_seconds: tuple[int, ...] = (2, 4, 8)

    def get_json(self, url: str, params: dict[str, Any] | None = None, headers: dict[str, str] | None = None) -> Any:
        response = self._request("GET", url, params=params, headers=headers)
        return response.json()

    def post_json(self, url: str, payload: Any, headers: dict[str, str] | None = None) -> int:
        response = self._request("POST", url, json=payload, headers=headers)
        return response.status_code

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        last_error: Exception | None = None
        for attempt in range(self.max_retries):
            try:
                if method == "GET":
                    resp = requests.get(url, timeout=self.timeout_seconds, **kwargs)
                elif method == "POST":
                    resp = requests.post(url, timeout=self.timeout_seconds, **kwargs)
                else:
                    resp = requests.request(method, url, timeout=self.timeout_seconds, **kwargs)
                if resp.status_code in RETRYABLE_STATUSES:
                    raise requests.HTTPError(f"retryable status {resp.status_code}", response=resp)
                resp.raise_for_status()
                return resp
            except (requests.RequestException, ValueError) as exc:
                last_error = exc
                # 4xx other than 429 will not get better on retry
                response = getattr(exc, "response", None)
                if response is not None and response.status_code not in RETRYABLE_STATUSES:
                    break
                if attempt >= self.max_retries - 1:
                    break
                delay = self.backoff_seconds[min(attempt, len(self.backoff_seconds) - 1)]
                logger.debug("%s %s failed (%s), retrying in %ss", method, url, exc, delay)
                time.sleep(delay)
        raise RuntimeError(f"Request failed after retries: {url} ({last_error})")
