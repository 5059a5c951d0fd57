"""Token handling for GitHub API requests.

Tokens come from an explicit value or an environment variable. Anonymous
access is allowed; GitHub then applies its unauthenticated rate limits.
"""

import logging
import os
import re

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Raised when a configured token is malformed."""


class GitHubAuth:
    """Resolves and validates the token sent with each request.

    Accepted formats:
    - ghp_, gho_, ghu_, ghs_, ghr_: classic prefixed tokens
    - github_pat_: fine-grained personal access tokens
    - 40 lowercase hex characters: legacy classic tokens
    """

    VALID_PREFIXES = ("ghp_", "gho_", "ghu_", "ghs_", "ghr_", "github_pat_")
    CLASSIC_TOKEN_PATTERN = re.compile(r"^[a-f0-9]{40}$")
    MIN_PREFIXED_LENGTH = 20

    def __init__(self, token: str | None = None, token_env: str | None = "GITHUB_TOKEN") -> None:
        """Resolve the token.

        Args:
            token: Explicit token. Takes precedence over the environment.
            token_env: Environment variable to read when no token is given.
                None disables the environment lookup.

        Raises:
            AuthenticationError: If a token was found but is malformed.
        """
        resolved = token
        source = "explicit parameter"
        if resolved is None and token_env and os.environ.get(token_env):
            resolved = os.environ[token_env]
            source = f"{token_env} environment variable"

        self._token: str | None = resolved.strip() if resolved is not None else None

        if self._token is None:
            logger.debug("No GitHub token configured, using anonymous access")
            return

        self._validate_token(self._token)
        logger.debug("Using GitHub token from %s", source)

    def _validate_token(self, token: str) -> None:
        if not token:
            raise AuthenticationError("Token is empty")

        if token.startswith(self.VALID_PREFIXES):
            if len(token) < self.MIN_PREFIXED_LENGTH:
                raise AuthenticationError("Token appears too short to be valid")
            return

        if not self.CLASSIC_TOKEN_PATTERN.match(token):
            raise AuthenticationError(
                f"Invalid token format. Expected prefix {self.VALID_PREFIXES} "
                "or 40-character hex string (classic token)"
            )

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_anonymous(self) -> bool:
        return self._token is None

    def get_authorization_header(self) -> dict[str, str]:
        """Authorization header for the token, empty when anonymous."""
        if self._token is None:
            return {}
        return {"Authorization": f"token {self._token}"}
