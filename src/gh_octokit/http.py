"""HTTP transport for GitHub API requests.

The client facade only depends on the :class:`HTTPSession` protocol, so a
test (or an application with its own connection handling) can inject any
object with a matching ``send`` coroutine. :class:`HttpxSession` is the
default implementation.

Retries, backoff and rate limiting are deliberately absent here; a session
reports the first failure it sees.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)


class GitHubHTTPError(Exception):
    """Base exception for transport-level failures."""


class GitHubStatusError(GitHubHTTPError):
    """Raised when GitHub answers with a 4xx or 5xx status."""

    def __init__(self, status_code: int, message: str = "", url: str = "") -> None:
        self.status_code = status_code
        self.message = message
        self.url = url
        detail = f": {message}" if message else ""
        super().__init__(f"HTTP {status_code} for {url}{detail}")


class GitHubTimeoutError(GitHubHTTPError):
    """Raised when a request times out."""


class RequestCancelled(GitHubHTTPError):
    """Delivered to a completion callback when its request was cancelled."""


@dataclass
class GitHubResponse:
    """GitHub API response with parsed data."""

    status_code: int
    data: Any
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    url: str = ""

    @property
    def is_success(self) -> bool:
        """Check if response was successful (2xx status code)."""
        return 200 <= self.status_code < 300


@runtime_checkable
class HTTPSession(Protocol):
    """Transport used by :class:`gh_octokit.client.Octokit`.

    ``send`` must return the decoded response for 2xx answers and raise a
    :class:`GitHubHTTPError` for anything else.
    """

    async def send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> GitHubResponse: ...


def _error_message(data: Any) -> str:
    if isinstance(data, dict):
        return str(data.get("message", ""))
    if isinstance(data, str):
        return data[:200]
    return ""


class HttpxSession:
    """:class:`HTTPSession` backed by ``httpx.AsyncClient``."""

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            timeout: Request timeout in seconds, used when this session
                creates its own client.
            client: Pre-built client to use instead. It is not closed by
                :meth:`close`.
        """
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)
        return self._client

    async def send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> GitHubResponse:
        """Send one request.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE).
            url: Absolute request URL.
            params: Query string parameters.
            json: JSON body.
            headers: Request headers.

        Returns:
            GitHubResponse for a 2xx answer.

        Raises:
            GitHubStatusError: On a 4xx/5xx answer.
            GitHubTimeoutError: If the request timed out.
            GitHubHTTPError: On an invalid URL or any other transport failure.
        """
        client = self._ensure_client()
        logger.debug("%s %s", method, url)

        try:
            response = await client.request(method, url, params=params, json=json, headers=headers)
        except httpx.TimeoutException as e:
            logger.warning("Timeout for %s %s", method, url)
            raise GitHubTimeoutError(f"Request timeout: {e}") from e
        except httpx.InvalidURL as e:
            logger.warning("Invalid URL for %s %r: %s", method, url, e)
            raise GitHubHTTPError(f"Invalid URL: {e}") from e
        except httpx.HTTPError as e:
            logger.warning("Network error for %s %s: %s", method, url, e)
            raise GitHubHTTPError(f"Network error: {e}") from e

        data = None
        if response.content:
            try:
                data = response.json()
            except ValueError as e:
                logger.debug("Response body is not JSON: %s", e)
                data = response.text

        if response.status_code >= 400:
            logger.warning("HTTP %d for %s %s", response.status_code, method, url)
            raise GitHubStatusError(response.status_code, _error_message(data), str(response.url))

        return GitHubResponse(
            status_code=response.status_code,
            data=data,
            headers=response.headers,
            url=str(response.url),
        )

    async def close(self) -> None:
        """Close the underlying client if this session created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxSession":
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
