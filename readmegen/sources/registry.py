"""npm registry probe deciding which version badge the README shows."""

from __future__ import annotations

from http.client import HTTPException
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from ..logging import get_logger
from ..utils import run_blocking


class NpmRegistry:
    DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"

    def __init__(
        self,
        registry_url: str = DEFAULT_REGISTRY_URL,
        *,
        request_timeout: Optional[float] = 10.0,
    ) -> None:
        self.registry_url = registry_url.rstrip("/")
        self.request_timeout = request_timeout
        self.logger = get_logger("sources.registry")

    def package_exists(self, name: str) -> bool:
        # Scoped names keep their "@" but need the slash escaped.
        endpoint = f"{self.registry_url}/{quote(name, safe='@')}"
        try:
            request = Request(endpoint, headers={"Accept": "application/json"}, method="HEAD")
            with urlopen(request, timeout=self.request_timeout) as response:
                return response.status == 200
        except HTTPError as exc:
            self.logger.debug("npm registry returned HTTP %s for %s", exc.code, name)
        except (URLError, OSError, HTTPException) as exc:
            self.logger.debug("npm registry unreachable: %s", exc)
        except ValueError as exc:
            self.logger.debug("Invalid npm registry url %s: %s", endpoint, exc)
        return False

    async def is_published(self, name: str | None) -> bool:
        """Return True when ``name`` exists on the registry; failures count as unpublished."""
        if not name:
            return False
        return await run_blocking(self.package_exists, name)


__all__ = ["NpmRegistry"]
