from __future__ import annotations

import concurrent.futures
import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response


# Whole-call deadlines run the blocking request on a worker thread.
_UPSTREAM_POOL = concurrent.futures.ThreadPoolExecutor(max_workers=8, thread_name_prefix="krishi-upstream")


def _close_response(future: concurrent.futures.Future) -> None:
    if future.cancelled() or future.exception() is not None:
        return
    future.result().close()


class ProviderError(RuntimeError):
    """Base provider error."""


class QuotaExceeded(ProviderError):
    """Raised when a provider reports a quota/usage limit issue."""


@dataclass
class RequestConfig:
    # Single attempt per request; the fallback path replaces retries.
    # ``timeout`` bounds the whole call, body included.
    timeout: float = 4.0
    user_agent: str = "KrishiAI/1.0"


class HttpWeatherProvider:
    """Base class that adds a bounded timeout and status handling for HTTP providers."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__module__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text[:200])
            raise QuotaExceeded("quota exceeded")
        if not 200 <= response.status_code < 300:
            self._log.warning("Provider returned %s: %s", response.status_code, response.text[:200])
            raise ProviderError(f"HTTP {response.status_code}")
        content_type = response.headers.get("Content-Type", "")
        if "application/json" not in content_type:
            raise ProviderError(f"unexpected content type {content_type!r}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        timeout = self.request_config.timeout
        future = _UPSTREAM_POOL.submit(self._send, method, url, kwargs)
        try:
            response = future.result(timeout=timeout)
        except concurrent.futures.TimeoutError as exc:
            # The worker may still be reading; release its connection when it ends.
            future.add_done_callback(_close_response)
            self._log.warning("Request exceeded %ss deadline", timeout)
            raise ProviderError("timeout") from exc
        except requests.Timeout as exc:
            self._log.warning("Request timed out after %ss", timeout)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.warning("Request failed: %s", exc)
            raise ProviderError("request failed") from exc
        return self._handle_response(response)

    def _send(self, method: str, url: str, kwargs: dict) -> Response:
        headers = {"Accept": "application/json", "User-Agent": self.request_config.user_agent}
        # Without stream=True the body is fully read before this returns.
        return self.session.request(
            method,
            url,
            headers=headers,
            timeout=self.request_config.timeout,
            **kwargs,
        )

    def _json(self, response: Response) -> dict:
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError("invalid json") from exc
        if not isinstance(data, dict):
            raise ProviderError("unexpected payload")
        return data


__all__ = ["HttpWeatherProvider", "ProviderError", "QuotaExceeded", "RequestConfig"]
