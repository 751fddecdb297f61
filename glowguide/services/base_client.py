"""Shared HTTP plumbing for the remote model clients."""

import logging
from typing import Any

import httpx

from ..errors import (
    HTTPFailureError,
    InvalidEndpointError,
    MalformedResponseError,
    NetworkFailureError,
)


logger = logging.getLogger(__name__)


class BaseAPIClient:
    """Owns a lazily created ``httpx.AsyncClient`` and turns every failure
    mode of a single JSON POST into a :mod:`glowguide.errors` exception.
    
    No retries: one attempt per call.
    """
    
    provider = "api"
    
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
    
    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(transport=self._transport)
        return self._client
    
    @staticmethod
    def _check_endpoint(url: str) -> httpx.URL:
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            raise InvalidEndpointError(url) from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise InvalidEndpointError(url)
        return parsed
    
    async def _post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
        timeout: float,
    ) -> dict[str, Any]:
        """POST ``payload`` and return the decoded JSON envelope.
        
        Raises:
            InvalidEndpointError: url is not http(s)
            NetworkFailureError: connection error or timeout
            HTTPFailureError: non-2xx status, carries status and raw body
            MalformedResponseError: body is not a JSON object
        """
        endpoint = self._check_endpoint(url)
        
        try:
            response = await self.client.post(
                endpoint,
                json=payload,
                headers={"Content-Type": "application/json", **headers},
                timeout=timeout,
            )
        except httpx.TransportError as e:
            logger.warning("%s request failed before a response: %s", self.provider, e)
            raise NetworkFailureError(e) from e
        
        if not response.is_success:
            raise HTTPFailureError(response.status_code, response.text)
        
        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"{self.provider} envelope is not JSON") from e
        if not isinstance(data, dict):
            raise MalformedResponseError(f"{self.provider} envelope is not a JSON object")
        return data
    
    async def close(self):
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
