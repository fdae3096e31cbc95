"""
HTTP plumbing for the Screwdriver API client.

Design Principles:
1. Async-first: All I/O operations are async
2. Single attempt: a failed call is raised, never retried
3. Typed errors: HTTP failures map onto ApiError subtypes

Error Mapping:
    - 401/403: AuthenticationError
    - 404: NotFoundError
    - other non-2xx, timeouts, any other transport failure: ApiError
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class ApiError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        api: str,
        *,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.api = api
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        parts = [f"[{self.api}] {self.args[0]}"]
        if self.status_code:
            parts.append(f"(status={self.status_code})")
        return " ".join(parts)


class AuthenticationError(ApiError):
    """Raised when authentication fails (401/403)."""


class NotFoundError(ApiError):
    """Raised when a resource is not found (404)."""


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Configuration for an API client."""

    # Authentication
    token: str = ""

    # Connection
    base_url: str = ""
    timeout: float = 30.0

    # Observability
    log_requests: bool = False
    log_responses: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if not self.token:
            raise ValueError("API token is required")
        if not self.base_url:
            raise ValueError("API base URL is required")
        if self.timeout <= 0:
            raise ValueError("API timeout must be positive")


# =============================================================================
# Base Client
# =============================================================================


class ApiClient(ABC):
    """
    Abstract base class for API clients.

    Provides common functionality:
    - HTTP client management
    - Authentication header injection
    - Error mapping
    - Request/response logging

    Subclasses must implement:
    - name: API identifier
    - _get_auth_headers(): Return authentication headers
    """

    def __init__(self, config: ApiConfig):
        """
        Initialize the API client.

        Args:
            config: API configuration
        """
        self.config = config
        self._client: httpx.AsyncClient | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this API."""
        ...

    @abstractmethod
    def _get_auth_headers(self) -> dict[str, str]:
        """Return authentication headers for requests."""
        ...

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                # Trailing slash so relative paths extend the base path
                base_url=self.config.base_url.rstrip("/") + "/",
                timeout=self.config.timeout,
                headers={
                    "Accept": "application/json",
                    **self._get_auth_headers(),
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
    ) -> httpx.Response:
        """
        Execute a single HTTP request.

        Args:
            method: HTTP method
            path: URL path relative to base_url

        Returns:
            httpx.Response

        Raises:
            ApiError: On any transport failure or non-2xx response
        """
        client = self._get_client()

        if self.config.log_requests:
            logger.debug(f"[{self.name}] {method} {path}")

        try:
            response = await client.request(method=method, url=path)
        except httpx.TimeoutException as e:
            raise ApiError(f"Request timeout: {e}", self.name) from e
        except httpx.NetworkError as e:
            raise ApiError(f"Network error: {e}", self.name) from e
        except httpx.TransportError as e:
            raise ApiError(f"Transport error: {e}", self.name) from e

        if self.config.log_responses:
            logger.debug(
                f"[{self.name}] Response: status={response.status_code} "
                f"body={response.text[:500] if response.text else 'empty'}"
            )

        self._check_response(response)
        return response

    async def _get_json(self, path: str) -> dict[str, Any]:
        """GET path and return the decoded JSON object."""
        response = await self._request("GET", path)
        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(
                f"Invalid JSON response for {path}",
                self.name,
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        if not isinstance(data, dict):
            raise ApiError(
                f"Expected a JSON object for {path}, got {type(data).__name__}",
                self.name,
                status_code=response.status_code,
            )
        return data

    def _check_response(self, response: httpx.Response) -> None:
        """
        Check response for errors and raise appropriate exceptions.

        Raises:
            AuthenticationError: For 401/403
            NotFoundError: For 404
            ApiError: For other errors
        """
        if response.is_success:
            return

        status = response.status_code
        body = response.text

        if status == 401 or status == 403:
            raise AuthenticationError(
                f"Authentication failed: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        if status == 404:
            raise NotFoundError(
                f"Resource not found: {body}",
                self.name,
                status_code=status,
                response_body=body,
            )

        raise ApiError(
            f"Request failed: {body}",
            self.name,
            status_code=status,
            response_body=body,
        )

    async def __aenter__(self) -> "ApiClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
