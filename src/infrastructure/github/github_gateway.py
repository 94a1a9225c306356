from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from src.domain.errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)


class GitHubGateway:
    """Read-only adapter over the GitHub REST API.

    One attempt per call, no retries. A non-2xx answer from GitHub is reported
    uniformly as "No Github profile found".
    """

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self.base_url = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
        self.client_id = os.getenv("GITHUB_CLIENT_ID")
        self.client_secret = os.getenv("GITHUB_CLIENT_SECRET")
        self.timeout = float(os.getenv("GITHUB_TIMEOUT", "10"))
        self.transport = transport

    def _params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"per_page": 5, "sort": "created:asc"}
        if self.client_id and self.client_secret:
            params["client_id"] = self.client_id
            params["client_secret"] = self.client_secret
        return params

    def fetch_repositories(self, username: str) -> list[dict[str, Any]]:
        url = f"{self.base_url}/users/{username}/repos"
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(
                    url,
                    params=self._params(),
                    headers={"user-agent": "devconnector-backend"},
                )
        except httpx.HTTPError as exc:
            logger.warning("GitHub request for %s failed: %s", username, exc)
            raise UpstreamError("No Github profile found") from exc

        if not response.is_success:
            logger.info("GitHub answered %s for %s", response.status_code, username)
            raise NotFoundError("No Github profile found", status_code=400)
        try:
            repos = response.json()
        except ValueError as exc:
            logger.warning("GitHub sent a non-JSON body for %s", username)
            raise UpstreamError("No Github profile found") from exc
        if not isinstance(repos, list):
            logger.warning("GitHub sent %s instead of a repository list for %s", type(repos).__name__, username)
            raise UpstreamError("No Github profile found")
        return repos
