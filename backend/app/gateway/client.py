"""
HTTP client for the upstream address service.

This is the only place that talks HTTP to the address provider.  Every
failure (transport error, timeout, unexpected status, undecodable body)
surfaces as UpstreamCallError so the gateways can convert it into an
UpstreamFailure outcome.  A 404 is reported as None, not as an error.
"""

from __future__ import annotations

from typing import Any

import httpx

from app.core.logging import get_logger
from app.gateway.errors import UpstreamCallError

logger = get_logger(__name__)

# Default timeout for upstream calls (seconds)
DEFAULT_TIMEOUT = 10.0


class AddressServiceClient:
    """Handles HTTP calls to the address verification / reference API."""

    def __init__(
        self,
        base_url: str,
        auth_token: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: API root, e.g. "https://host/QuotingAPI/api/v1".
            auth_token: Base64 credentials for HTTP Basic auth (optional).
            timeout: Per-request timeout in seconds.
            transport: Optional httpx transport (tests inject a MockTransport).
        """
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> AddressServiceClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ─── Endpoints ─────────────────────────────────────

    async def validate_address(self, payload: dict[str, str]) -> dict[str, Any]:
        """POST a structured address for verification.  Returns the JSON verdict."""
        response = await self._request("POST", "/Address/Validate", json=payload)
        if response is None:
            raise UpstreamCallError(
                "Address validation endpoint returned 404",
                operation="validate_address",
                status_code=404,
            )
        data = self._json(response, "validate_address")
        if not isinstance(data, dict):
            raise UpstreamCallError(
                "Address validation response is not an object",
                operation="validate_address",
                response_body=response.text,
            )
        return data

    async def get_counties(self, zip_code: str) -> list[dict[str, Any]] | None:
        """GET county records for a ZIP.  None when upstream has no record."""
        response = await self._request("GET", f"/Address/Counties/{zip_code}")
        if response is None:
            return None
        data = self._json(response, "get_counties")
        if not isinstance(data, list):
            raise UpstreamCallError(
                "County lookup response is not a list",
                operation="get_counties",
                response_body=response.text,
            )
        return data

    async def get_state_abbreviation(self, zip_code: str) -> str | None:
        """GET the state abbreviation for a ZIP.  None on any 4xx."""
        response = await self._request(
            "GET",
            f"/Address/StateAbbreviation/{zip_code}",
            not_found_statuses=range(400, 500),
        )
        if response is None:
            return None
        return response.text.replace('"', "").strip()

    # ─── Helpers ───────────────────────────────────────

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Basic {self.auth_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        not_found_statuses=(404,),
    ) -> httpx.Response | None:
        logger.debug("Address service request", method=method, path=path)
        try:
            response = await self._client.request(
                method,
                path,
                headers=self._headers(),
                json=json,
            )
        except httpx.HTTPError as exc:
            raise UpstreamCallError(
                f"{type(exc).__name__}: {exc}",
                operation=path,
            ) from exc

        logger.debug(
            "Address service response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.status_code in not_found_statuses:
            return None
        if not response.is_success:
            raise UpstreamCallError(
                f"Address service returned {response.status_code}",
                operation=path,
                status_code=response.status_code,
                response_body=response.text,
            )
        return response

    def _json(self, response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamCallError(
                f"Malformed JSON from address service: {exc}",
                operation=operation,
                status_code=response.status_code,
                response_body=response.text,
            ) from exc
