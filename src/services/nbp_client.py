from __future__ import annotations

import logging
from typing import Protocol

import requests

logger = logging.getLogger(__name__)

# Static XML feed docs: https://nbp.pl/statystyka-i-sprawozdawczosc/kursy/
NBP_TABLE_A_URL = "https://static.nbp.pl/dane/kursy/xml/lastA.xml"


class FetchError(RuntimeError):
    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ByteFetcher(Protocol):
    def fetch(self, url: str) -> bytes: ...


class NbpHttpClient(ByteFetcher):
    """Single-attempt HTTP GET returning the raw response body."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        if timeout <= 0:
            msg = "timeout must be > 0"
            raise ValueError(msg)

        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch(self, url: str) -> bytes:
        logger.debug("Fetching %s (timeout=%ss)", url, self.timeout)
        try:
            response = self._session.request("GET", url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = getattr(exc.response, "status_code", None)
            logger.warning("Fetching %s failed with HTTP %s", url, status_code)
            raise FetchError(f"Error fetching data from {url}", url=url, status_code=status_code) from exc
        except requests.RequestException as exc:
            logger.warning("Fetching %s failed: %s", url, exc.__class__.__name__)
            raise FetchError(f"Error fetching data from {url}", url=url) from exc

        return response.content


__all__ = ["NBP_TABLE_A_URL", "ByteFetcher", "FetchError", "NbpHttpClient"]
