"""HTTP client wrapper around httpx."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from darkcss.errors import FetchError, FetchTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedDocument:
    """Body of a fetched page or stylesheet."""

    url: str
    final_url: str
    text: str
    status_code: int = 200


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into darkcss exceptions.

    Safe to share between threads.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            headers=headers or {},
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        )

    def get(self, url: str, headers: dict[str, str] | None = None) -> FetchedDocument:
        """Fetch ``url`` and return its text.

        Raises FetchError on non-2xx status or transport failure.
        """
        logger.debug("GET %s", url)
        try:
            resp = self._client.get(url, headers=headers or {})
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(f"Timed out fetching {url}", url=url, cause=exc) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}", url=url, cause=exc) from exc

        if resp.status_code >= 300:
            raise FetchError(
                f"Failed to fetch {url}: HTTP {resp.status_code}",
                url=url,
                status_code=resp.status_code,
            )

        return FetchedDocument(
            url=url,
            final_url=str(resp.url),
            text=resp.text,
            status_code=resp.status_code,
        )

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
