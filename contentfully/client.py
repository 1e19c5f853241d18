"""Contentful Delivery API client.

Fetches raw JSON payloads; all link resolution happens in
``contentfully.resolution``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import requests

from contentfully.domain.constants import LOCALES_PATH

logger = logging.getLogger(__name__)


class ClientConfigError(Exception):
    """Required client configuration is missing or invalid."""
    pass


class ContentfulRequestError(Exception):
    """Error fetching from the Delivery API."""

    def __init__(self, message: str, path: str, status_code: int | None = None):
        super().__init__(message)
        self.path = path
        self.status_code = status_code


@dataclass
class ClientConfig:
    """Connection settings for one space environment."""

    space_id: str
    access_token: str
    environment: str = 'master'
    host: str = 'cdn.contentful.com'
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Read settings from CONTENTFUL_* environment variables."""
        space_id = os.environ.get('CONTENTFUL_SPACE_ID', '')
        access_token = os.environ.get('CONTENTFUL_ACCESS_TOKEN', '')
        missing = [
            name for name, value in (
                ('CONTENTFUL_SPACE_ID', space_id),
                ('CONTENTFUL_ACCESS_TOKEN', access_token),
            ) if not value
        ]
        if missing:
            raise ClientConfigError(f"Missing environment variables: {', '.join(missing)}")

        timeout = os.environ.get('CONTENTFUL_TIMEOUT', '30')
        try:
            timeout_value = float(timeout)
        except ValueError:
            raise ClientConfigError(f"Invalid CONTENTFUL_TIMEOUT: {timeout!r}")

        return cls(
            space_id=space_id,
            access_token=access_token,
            environment=os.environ.get('CONTENTFUL_ENVIRONMENT', 'master'),
            host=os.environ.get('CONTENTFUL_HOST', 'cdn.contentful.com'),
            timeout=timeout_value,
        )

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/spaces/{self.space_id}/environments/{self.environment}"


class ContentfulClient:
    """Thin blocking client over a ``requests`` session.

    Args:
        config: Space, token and transport settings.
        session: Optional pre-configured session (tests inject a fake).
    """

    def __init__(self, config: ClientConfig, session: requests.Session | None = None):
        self.config = config
        self._session = session or requests.Session()

    def query(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET a path under the environment and return the decoded JSON."""
        url = f"{self.config.base_url}{path}"
        logger.debug("GET %s %s", path, params)
        try:
            resp = self._session.get(
                url,
                params=params or {},
                headers=self._headers(),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise ContentfulRequestError(f"Request to {path} failed: {e}", path) from e

        if not resp.ok:
            raise ContentfulRequestError(
                f"Request to {path} failed ({resp.status_code}): {resp.text}",
                path,
                status_code=resp.status_code,
            )
        return resp.json()

    def get_locales(self) -> dict[str, Any]:
        """Fetch the locale catalog ``{items: [{code, default, ...}]}``."""
        return self.query(LOCALES_PATH)

    def close(self) -> None:
        self._session.close()

    def _headers(self) -> dict[str, str]:
        return {'Authorization': f"Bearer {self.config.access_token}"}
