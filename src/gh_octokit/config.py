"""Client configuration loading and validation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from gh_octokit import __version__

DEFAULT_API_ENDPOINT = "https://api.github.com"
DEFAULT_API_VERSION = "2022-11-28"


class AuthConfig(BaseModel):
    """Credentials configuration."""

    token: str | None = Field(default=None, description="Explicit token, overrides token_env")
    token_env: str = "GITHUB_TOKEN"


class Configuration(BaseModel):
    """Settings shared by every request an Octokit client makes."""

    api_endpoint: str = DEFAULT_API_ENDPOINT
    auth: AuthConfig = Field(default_factory=AuthConfig)
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = f"gh-octokit/{__version__}"
    api_version: str = DEFAULT_API_VERSION

    @field_validator("api_endpoint")
    @classmethod
    def validate_api_endpoint(cls, v: str) -> str:
        """Require an absolute http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            msg = f"api_endpoint must be an http(s) URL, got '{v}'"
            raise ValueError(msg)
        return v.rstrip("/")


def load_config(path: Path) -> Configuration:
    """Load and validate configuration from a YAML file.

    An empty file yields the defaults.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated Configuration.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValidationError: If the config is invalid.
    """
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open() as f:
        raw_config: dict[str, Any] | None = yaml.safe_load(f)

    return Configuration.model_validate(raw_config or {})
