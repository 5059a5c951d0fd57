"""Request routing primitives.

Each API call is a frozen dataclass deriving from :class:`Router`. The
variant's fields are the call's inputs; its ``method``, ``encoding``,
``path`` and ``params`` are pure functions of those inputs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

import httpx

from gh_octokit.config import Configuration


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class HTTPEncoding(str, Enum):
    """Where ``params`` go: the query string or a JSON body."""

    URL = "url"
    JSON = "json"


@dataclass(frozen=True)
class PreparedRequest:
    """Absolute request derived from a router and a configuration."""

    method: HTTPMethod
    url: str
    params: dict[str, Any] | None = None
    json: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def full_url(self) -> str:
        """URL including the encoded query string."""
        return str(httpx.URL(self.url, params=self.params or None))


class Router:
    """Base for operation variants. Subclasses are frozen dataclasses."""

    method: ClassVar[HTTPMethod] = HTTPMethod.GET
    encoding: ClassVar[HTTPEncoding] = HTTPEncoding.URL

    @property
    def path(self) -> str:
        """Path relative to the API endpoint, without a leading slash."""
        raise NotImplementedError

    @property
    def params(self) -> dict[str, Any]:
        return {}

    def build_request(
        self,
        configuration: Configuration,
        headers: dict[str, str] | None = None,
    ) -> PreparedRequest:
        """Resolve this operation against a configuration.

        Query parameters are sorted by key so the URL is deterministic.
        """
        url = f"{configuration.api_endpoint}/{self.path}"
        params = self.params

        if self.encoding is HTTPEncoding.JSON:
            return PreparedRequest(self.method, url, json=params, headers=headers or {})

        query = {key: params[key] for key in sorted(params)} if params else None
        return PreparedRequest(self.method, url, params=query, headers=headers or {})


def compact(**params: Any) -> dict[str, Any]:
    """Build a params dict, dropping None values and unwrapping enums."""
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in params.items()
        if value is not None
    }
