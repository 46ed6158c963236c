"""HTTP client for ArcGIS REST endpoints."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ...core.exceptions import ProviderError
from .config import DEFAULT_PARAMS, DEFAULT_TIMEOUT, SECRET_PARAMS

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    ArcGIS servers report most failures with a ``200 OK`` whose JSON body
    holds an ``error`` object; ``get`` turns those into ``ProviderError``.
    """

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """GET a JSON resource.

        Args:
            url: Absolute URL, or a path appended to ``base_url``
            params: Extra query parameters, merged over ``f=json``
            headers: Optional request headers

        Returns:
            Decoded JSON body

        Raises:
            ProviderError: If the body is an ArcGIS error payload
            aiohttp.ClientResponseError: On HTTP error statuses
        """
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        query = {**DEFAULT_PARAMS, **(params or {})}
        logger.debug("arcgis_request", extra={"url": url, "params": redact_params(query)})

        async with self.session.get(url, params=query, headers=headers) as response:
            response.raise_for_status()
            # Many servers send JSON as text/plain
            body = await response.json(content_type=None)

        check_error_payload(body, url)
        return body

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def check_error_payload(body: Any, url: str) -> None:
    """Raise ``ProviderError`` if ``body`` is an ArcGIS error response."""
    if not isinstance(body, dict) or "error" not in body:
        return

    error = body["error"] or {}
    code = error.get("code")
    message = error.get("message") or "Unknown error"
    details = [d for d in error.get("details") or [] if d]
    if details:
        message = f"{message}: {'; '.join(details)}"

    logger.warning("arcgis_error", extra={"url": url, "code": code, "error_message": message})
    raise ProviderError(f"{url}: {message}", code=code)


def redact_params(params: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``params`` without credentials, for logging."""
    return {k: v for k, v in params.items() if k.lower() not in SECRET_PARAMS}
