"""GitHub users API lookup used to discover an author's website."""

from __future__ import annotations

import json
import os
from http.client import HTTPException
from typing import Any, Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from ..logging import get_logger
from ..utils import run_blocking


class GithubLookupError(RuntimeError):
    """Raised when a GitHub profile cannot be fetched or decoded."""


class GithubClient:
    """Minimal client for ``GET /users/<handle>``."""

    DEFAULT_API_URL = "https://api.github.com"
    ENV_TOKEN_KEYS = ("GITHUB_TOKEN", "GH_TOKEN")

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        *,
        token: str | None = None,
        request_timeout: Optional[float] = 10.0,
        user_agent: str = "readmegen",
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.request_timeout = request_timeout
        self._token = token or self._token_from_env()
        self._headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
        }
        if self._token:
            self._headers["Authorization"] = f"Bearer {self._token}"
        self.logger = get_logger("sources.github")

    def fetch_user(self, handle: str) -> Dict[str, Any]:
        """Return the profile JSON for ``handle``; raises GithubLookupError on any failure."""
        endpoint = f"{self.api_url}/users/{quote(handle, safe='')}"
        try:
            request = Request(endpoint, headers=self._headers, method="GET")
            with urlopen(request, timeout=self.request_timeout) as response:
                body = response.read()
        except HTTPError as exc:
            raise GithubLookupError(f"GitHub returned HTTP {exc.code} for {handle}") from exc
        except (URLError, OSError, HTTPException) as exc:
            raise GithubLookupError(f"Unable to reach GitHub: {exc}") from exc
        except ValueError as exc:
            raise GithubLookupError(f"Invalid GitHub API url {endpoint}: {exc}") from exc
        try:
            payload = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise GithubLookupError(f"Invalid JSON from GitHub for {handle}") from exc
        if not isinstance(payload, dict):
            raise GithubLookupError(f"Unexpected GitHub payload for {handle}")
        return payload

    async def author_website(self, handle: str | None) -> Optional[str]:
        """Return the profile's ``blog`` field, or None when missing or on failure."""
        if not handle:
            return None
        try:
            profile = await run_blocking(self.fetch_user, handle)
        except GithubLookupError as exc:
            self.logger.debug("Author website lookup failed: %s", exc)
            return None
        blog = profile.get("blog")
        if isinstance(blog, str) and blog.strip():
            return blog.strip()
        return None

    @classmethod
    def _token_from_env(cls) -> Optional[str]:
        for key in cls.ENV_TOKEN_KEYS:
            value = os.environ.get(key, "").strip()
            if value:
                return value
        return None


__all__ = ["GithubClient", "GithubLookupError"]
