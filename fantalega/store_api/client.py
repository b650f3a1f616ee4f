"""Read-only client for the league key-value store."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

STORE_TABLE = "league_store"


class StoreApiError(RuntimeError):
    """Raised for key-value store request failures."""


@dataclass(frozen=True)
class StoreClient:
    base_url: str
    api_key: Optional[str] = None
    table: str = STORE_TABLE
    timeout_seconds: int = 10

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": "fantalega", "Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def get_value(self, key: str) -> Any:
        """Return the stored value for ``key``, or None when the key is absent."""
        url = f"{self.base_url.rstrip('/')}/rest/v1/{self.table}"
        try:
            response = requests.get(
                url,
                params={"key": f"eq.{key}", "select": "value"},
                headers=self._headers(),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            error_body = exc.response.text if exc.response is not None else ""
            status = exc.response.status_code if exc.response is not None else "?"
            raise StoreApiError(
                f"HTTP {status} for {url} (key={key}): {error_body or exc}"
            ) from exc
        except requests.RequestException as exc:
            raise StoreApiError(f"Request failed for {url}: {exc}") from exc

        if not response.text:
            raise StoreApiError(f"Empty response for {response.url}")

        try:
            payload = response.json()
        except json.JSONDecodeError as exc:
            raise StoreApiError(f"Invalid JSON from {response.url}") from exc

        if not isinstance(payload, list):
            raise StoreApiError(f"Unexpected payload shape from {response.url}")
        if not payload:
            logger.info("Store key %s is empty", key)
            return None
        row = payload[0]
        return row.get("value") if isinstance(row, dict) else None
