from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.exceptions import DocumentStoreError


@dataclass(frozen=True)
class DocumentStoreConfig:
    base_url: str
    bin_id: str
    master_key: str
    timeout: Optional[float] = None

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.bin_id}"


class JsonBinDocumentStore:
    """HTTP client for a JSONBin-style document store.

    Note: One shared ``requests.Session`` per client; every call is a single
    round trip with no retry.
    """

    def __init__(self, config: DocumentStoreConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Content-Type": "application/json",
                "X-Master-Key": config.master_key,
            }
        )

    def fetch(self) -> dict[str, Any]:
        try:
            response = self._session.get(self._config.url, timeout=self._config.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise DocumentStoreError(f"GET {self._config.url} failed: {e}") from e
        except ValueError as e:
            raise DocumentStoreError(f"GET {self._config.url} returned invalid JSON") from e

        if not isinstance(body, dict):
            raise DocumentStoreError(f"GET {self._config.url} returned {type(body).__name__}, expected object")
        return body

    def replace(self, document: dict[str, Any]) -> None:
        try:
            response = self._session.put(self._config.url, json=document, timeout=self._config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise DocumentStoreError(f"PUT {self._config.url} failed: {e}") from e
